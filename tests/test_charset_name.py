import logging

import pytest
from mime_charset import (
    Charset,
    CharsetName,
    REGISTRY,
    Registered,
    Unregistered,
    UnknownCharsetError,
    parse,
    format,
    equals,
)


def test_parse_registered():
    name = parse("utf-8")
    assert name == Registered(Charset.UTF_8)
    assert name.charset is Charset.UTF_8
    assert name.is_registered
    assert format(name) == "UTF-8"


def test_parse_alias_spellings():
    assert parse("UTF8") == Registered(Charset.UTF_8)
    assert equals(parse("UTF8"), parse("utf-8"))

    assert parse("us-ascii") == Registered(Charset.US_ASCII)
    assert parse("US-Ascii") == Registered(Charset.US_ASCII)
    assert parse("US-ASCII") == Registered(Charset.US_ASCII)
    assert parse("Shift_JIS") == Registered(Charset.SHIFT_JIS)
    assert parse("latin1") == Registered(Charset.ISO_8859_1)
    assert parse("csISOLatin1") == Registered(Charset.ISO_8859_1)


def test_parse_unregistered():
    name = parse("x-my-custom-charset")
    assert name == Unregistered("x-my-custom-charset")
    assert not name.is_registered
    assert format(name) == "x-my-custom-charset"


def test_parse_trims_ascii_whitespace():
    assert parse("  iso-8859-1  ") == Registered(Charset.ISO_8859_1)
    assert parse("\tutf-8\r\n") == Registered(Charset.UTF_8)
    assert parse("\x0bkoi8-r\x0c") == Registered(Charset.KOI8_R)

    name = parse("  X-Custom \t")
    assert isinstance(name, Unregistered)
    assert name.raw == "X-Custom"


def test_parse_keeps_other_whitespace():
    # internal whitespace is not collapsed
    name = parse("utf -8")
    assert isinstance(name, Unregistered)
    assert name.raw == "utf -8"

    # no-break space is not ASCII whitespace
    name = parse("\u00a0utf-8")
    assert isinstance(name, Unregistered)
    assert name.raw == "\u00a0utf-8"

    # neither are the ASCII separator controls
    name = parse("\x1cutf-8")
    assert isinstance(name, Unregistered)
    assert name.raw == "\x1cutf-8"


def test_parse_empty():
    name = parse("")
    assert name == Unregistered("")
    assert format(name) == ""

    assert parse("   ") == Unregistered("")


def test_parse_is_total():
    for s in ["", " ", "\x00", "\x00utf-8", "\x7f", ";", "=", '"utf-8"',
              "utf-8; q=0.5", "☃", "\ud800", "x" * 10000]:
        name = parse(s)
        assert isinstance(name, CharsetName)
        assert isinstance(format(name), str)


def test_parse_folds_ascii_case_only():
    # dotless i and Kelvin sign would match under Unicode case rules
    assert parse("\u0131so-8859-1") == Unregistered("\u0131so-8859-1")
    assert parse("\u212aOI8-R") == Unregistered("\u212aOI8-R")


def test_format_registered_uses_canonical_name():
    assert format(parse("latin1")) == "ISO-8859-1"
    assert format(parse("ms_kanji")) == "Shift_JIS"
    assert format(parse("csbig5")) == "Big5"
    assert format(parse("CP1252")) == "CP1252"  # not registered
    assert format(parse("cswindows1252")) == "windows-1252"


def test_format_unregistered_preserves_text():
    for s in ["x-my-custom-charset", "X-MY-CUSTOM-CHARSET", "Foo Bar", "ü-8"]:
        assert format(Unregistered(s)) == s
        assert format(parse(s)) == s


def test_format_rejects_non_charset_names():
    with pytest.raises(TypeError):
        format("UTF-8")
    with pytest.raises(TypeError):
        format(None)


def test_to_string_and_str():
    assert parse("utf8").to_string() == "UTF-8"
    assert str(parse("utf8")) == "UTF-8"
    assert str(Unregistered("ABCD")) == "ABCD"
    assert str(parse("  ABCD ")) == "ABCD"


def test_canonical():
    assert CharsetName.canonical("latin1") == "ISO-8859-1"
    assert CharsetName.canonical(" iso-ir-6 ") == "US-ASCII"
    assert CharsetName.canonical("x-Custom") == "x-Custom"


def test_from_string():
    assert CharsetName.from_string("utf-8") == Registered(Charset.UTF_8)
    assert CharsetName.from_string("x-foo") == Unregistered("x-foo")

    assert Registered.from_string(" l1 ") == Registered(Charset.ISO_8859_1)


def test_registered_from_string_rejects_unknown():
    with pytest.raises(UnknownCharsetError) as exc_info:
        Registered.from_string("  x-foo ")
    assert exc_info.value.name == "x-foo"

    with pytest.raises(UnknownCharsetError):
        Registered.from_string("")


def test_equals_registered():
    assert equals(Registered(Charset.UTF_8), Registered(Charset.UTF_8))
    assert equals(parse("ISO_8859-1:1987"), parse("IBM819"))
    assert not equals(Registered(Charset.UTF_8), Registered(Charset.UTF_16))
    assert not equals(parse("latin1"), parse("latin2"))


def test_equals_unregistered_ignores_ascii_case():
    assert equals(Unregistered("Foo"), Unregistered("foo"))
    assert Unregistered("Foo") == Unregistered("foo")
    assert Unregistered("foobar") == Unregistered("FOOBAR")
    assert Unregistered("ABCD") == parse("abcd")

    assert not equals(Unregistered("foo"), Unregistered("foo "))
    assert not equals(Unregistered("foo-1"), Unregistered("foo_1"))
    # only ASCII letters fold
    assert not equals(Unregistered("ä"), Unregistered("Ä"))
    assert Unregistered("ä") != Unregistered("Ä")


def test_registered_never_equals_unregistered():
    registered = Registered(Charset.UTF_8)
    unregistered = Unregistered("UTF-8")

    assert not equals(registered, unregistered)
    assert not equals(unregistered, registered)
    assert registered != unregistered
    assert unregistered != registered
    # even though the text would resolve if parsed
    assert parse(unregistered.raw) == registered


def test_not_equal_to_plain_strings():
    assert parse("utf-8") != "UTF-8"
    assert Unregistered("foo") != "foo"


def test_equality_matches_equals():
    names = [parse(s) for s in ["utf-8", "UTF8", "latin1", "l1", "Foo", "FOO", "bar", ""]]
    for a in names:
        for b in names:
            assert (a == b) == equals(a, b)


def test_hash_consistent_with_equality():
    assert len({parse("utf8"), parse("UTF-8"), parse("csUTF8")}) == 1
    assert len({Unregistered("Foo"), Unregistered("FOO"), Unregistered("foo")}) == 1
    assert len({Registered(Charset.UTF_8), Unregistered("UTF-8")}) == 2

    counts = {}
    for s in ["utf-8", "UTF8", "latin1", "ISO-8859-1", "x-a", "X-A"]:
        name = parse(s)
        counts[name] = counts.get(name, 0) + 1
    assert counts == {
        Registered(Charset.UTF_8): 2,
        Registered(Charset.ISO_8859_1): 2,
        Unregistered("x-a"): 2,
    }


def test_ordering():
    names = [
        Unregistered("b"),
        parse("utf-8"),
        Unregistered("A"),
        parse("us-ascii"),
        parse("windows-1252"),
    ]
    assert sorted(names) == [
        Registered(Charset.US_ASCII),
        Registered(Charset.UTF_8),
        Registered(Charset.WINDOWS_1252),
        Unregistered("A"),
        Unregistered("b"),
    ]
    assert Registered(Charset.UTF_8) < Unregistered("a")
    assert Unregistered("a") <= Unregistered("A")
    assert Unregistered("A") >= Unregistered("a")
    assert not Unregistered("a") < Unregistered("A")

    with pytest.raises(TypeError):
        parse("utf-8") < "utf-8"


def test_repr():
    assert repr(parse("utf-8")) == "Registered(Charset.UTF_8)"
    assert repr(parse("x-foo")) == "Unregistered('x-foo')"


def test_constructor_type_checks():
    with pytest.raises(TypeError):
        Registered("UTF-8")
    with pytest.raises(TypeError):
        Unregistered(None)
    with pytest.raises(TypeError):
        Unregistered(b"utf-8")


def test_fallback_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="mime_charset.charset_name")
    parse("x-logged-charset")
    assert "x-logged-charset" in caplog.text


def test_round_trip_registered():
    for charset in Charset:
        name = Registered(charset)
        assert parse(format(name)) == name


def test_alias_equivalence():
    for charset in Charset:
        aliases = REGISTRY.aliases(charset)
        first = parse(aliases[0])
        for alias in aliases[1:]:
            assert parse(alias) == first


def test_case_insensitive_lookup():
    for charset in Charset:
        for alias in REGISTRY.aliases(charset):
            assert parse(alias) == parse(alias.upper()) == parse(alias.lower())
            assert parse(alias.upper()).charset is charset


def test_unregistered_preservation():
    for s in ["x-custom", "  X-Custom  ", "\tWeird.Name\n", "utf-9", "UTF 8"]:
        assert format(parse(s)) == s.strip(" \t\n\r\x0b\x0c")
