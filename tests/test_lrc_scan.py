from lrcparse.lrc.scan import scan_tags


def test_scan_single_tag():
    segments, text = scan_tags("[ar: Someone ]rest")
    assert [(s.key, s.value) for s in segments] == [("ar", " Someone ")]
    assert text == "rest"


def test_scan_stops_at_first_non_tag():
    segments, text = scan_tags("[00:01.00][00:02.00] hi [00:03.00]")
    assert [(s.key, s.value) for s in segments] == [("00", "01.00"), ("00", "02.00")]
    assert text == " hi [00:03.00]"
    assert (segments[1].start, segments[1].end) == (10, 20)


def test_scan_value_keeps_inner_colons():
    segments, text = scan_tags("[00:12:34]x")
    assert (segments[0].key, segments[0].value) == ("00", "12:34")
    assert text == "x"


def test_scan_empty_key_and_value():
    segments, text = scan_tags("[:]")
    assert (segments[0].key, segments[0].value) == ("", "")
    assert text == ""


def test_scan_no_tag():
    assert scan_tags("plain text") is None
    assert scan_tags(" [ar:x]") is None
    assert scan_tags("[no colon]") is None
    assert scan_tags("[ar:unclosed") is None
