from url_cleaner import KeywordUrlCleaner


def test_logger_levels(logger, log_output):
    logger.success("fine")
    logger.error("broken")
    logger.warning("careful")
    logger.info("note [b]literal[/b]")
    lines = log_output.getvalue().splitlines()
    assert lines == ["[✓] fine", "[✗] broken", "[!] careful", "[*] note [b]literal[/b]"]


def test_cut_is_reported(logger, log_output):
    cleaner = KeywordUrlCleaner(["?xmt"], logger=logger)
    assert cleaner.clean("xxx.com/?XMT=1") == "xxx.com/"
    output = log_output.getvalue()
    assert output.startswith("[*] xxx.com/?XMT=1")
    assert "'?xmt'" in output
    assert "index 8" in output


def test_invalid_url_is_reported(logger, log_output):
    cleaner = KeywordUrlCleaner(["?xmt"], logger=logger)
    assert cleaner.clean("http://[::1") == "http://[::1/"
    assert log_output.getvalue().startswith("[!] http://[::1")


def test_no_match_is_silent(logger, log_output):
    cleaner = KeywordUrlCleaner(["?xmt"], logger=logger)
    cleaner.clean("xxx.com/?other=1")
    KeywordUrlCleaner(logger=logger).clean("xxx.com/?xmt=1")
    assert log_output.getvalue() == ""


def test_dropped_duplicates_are_reported(logger, log_output):
    KeywordUrlCleaner(["a", "a", "b", "b"], logger=logger)
    assert log_output.getvalue().strip() == "[!] Dropped 2 duplicate keyword(s)"
