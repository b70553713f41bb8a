import io

import pytest
from rich.console import Console

from url_cleaner import Logger


@pytest.fixture
def log_output():
    return io.StringIO()


@pytest.fixture
def logger(log_output):
    return Logger(Console(file=log_output, width=200, color_system=None))
