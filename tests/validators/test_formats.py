"""Tests for the string format validators."""

import pytest

from tavern import (
    ASCII,
    ERR_DATETIME,
    ERR_FORMAT,
    ERR_HTML,
    ERR_JSON,
    ERR_REQUIRED,
    HSL,
    HSLA,
    HTML,
    ISBN10,
    ISBN13,
    JSON,
    RGB,
    RGBA,
    URL,
    UUID,
    UUID3,
    UUID4,
    UUID5,
    Alpha,
    AlphaUnicode,
    Alphanumeric,
    AlphanumericUnicode,
    Base64,
    Base64URL,
    BitcoinAddress,
    Custom,
    DataURI,
    Datetime,
    Email,
    Equal,
    Latitude,
    Longitude,
    MultiByte,
    Numeric,
    OneOf,
    Prefix,
    PrintableASCII,
    Regex,
    Required,
    Suffix,
    ValidationError,
    WrongTypeError,
    rule,
    validate,
)


def passes(value, *validators):
    return validate(rule(value, *validators)) is None


class TestEmail:
    """Test the Email validator."""

    def test_invalid(self):
        """Test addresses without a dotted domain."""
        assert validate(rule("yamiodymel@x", Email())) is ERR_FORMAT
        assert not passes("yamiodymel", Email())
        assert not passes("@xx.com", Email())
        assert not passes("yamiodymel@xx.com\n", Email())

    def test_valid(self):
        """Test a regular address."""
        assert passes("yamiodymel@xx.com", Email())
        assert passes("first.last+tag@sub.example.org", Email())

    def test_empty_is_skipped_unless_required(self):
        """Test an empty string is skipped, or fails Required."""
        assert passes("", Email())
        assert validate(rule("", Required(), Email())) is ERR_REQUIRED

    def test_non_string(self):
        """Test Email on a number is a usage error."""
        with pytest.raises(WrongTypeError):
            validate(rule(123, Email()))


class TestDatetime:
    """Test the Datetime validator."""

    @pytest.mark.parametrize(
        "value, layout",
        [
            ("2009/01/23", "%Y-%m-%d"),
            ("2018/04/39", "%Y/%m/%d"),
            ("14:32", "%I:%M"),
            ("1998-07-32", "%Y-%m-%d"),
            ("1998-7-3", "%Y-%m-%d"),
        ],
    )
    def test_invalid(self, value, layout):
        """Test values that do not parse or do not round-trip."""
        assert validate(rule(value, Datetime(layout))) is ERR_DATETIME

    @pytest.mark.parametrize(
        "value, layout",
        [
            ("2009/01/23", "%Y/%m/%d"),
            ("2018-02-14", "%Y-%m-%d"),
            ("12:32", "%I:%M"),
            ("14:32", "%H:%M"),
            ("", "%Y-%m-%d"),
        ],
    )
    def test_valid(self, value, layout):
        """Test values written exactly in the layout."""
        assert passes(value, Datetime(layout))

    def test_non_string(self):
        """Test Datetime on a number is a usage error."""
        with pytest.raises(WrongTypeError):
            validate(rule(20180214, Datetime("%Y%m%d")))


class TestHTML:
    """Test the HTML validator."""

    def test_invalid(self):
        """Test text without a complete tag."""
        assert validate(rule("hello", HTML())) is ERR_HTML
        assert validate(rule("<bhello", HTML())) is ERR_HTML

    def test_valid(self):
        """Test text containing tags."""
        assert passes("<b>hello</b>", HTML())
        assert passes("say <br/> hi", HTML())


class TestJSON:
    """Test the JSON validator."""

    def test_valid(self):
        """Test JSON documents in strings and bytes."""
        assert passes('{"a": 1}', JSON())
        assert passes(b"[1, 2]", JSON())
        assert passes("42", JSON())

    def test_invalid(self):
        """Test malformed documents."""
        assert validate(rule("{a: 1}", JSON())) is ERR_JSON
        assert validate(rule("[1, 2", JSON())) is ERR_JSON

    def test_non_string(self):
        """Test JSON on a dict is a usage error."""
        with pytest.raises(WrongTypeError):
            validate(rule({"a": 1}, JSON()))


class TestCoordinates:
    """Test Latitude and Longitude."""

    @pytest.mark.parametrize("value", ["1234.92967312345678", "35.", "90.1", "-91", "abc"])
    def test_invalid_latitude(self, value):
        """Test out-of-range or malformed latitudes."""
        assert validate(rule(value, Latitude())) is ERR_FORMAT

    @pytest.mark.parametrize("value", ["35.929673", "35", "-78.948237", "90", "+90.000", "0"])
    def test_valid_latitude(self, value):
        """Test latitudes within [-90, 90]."""
        assert passes(value, Latitude())

    @pytest.mark.parametrize("value", ["1234.92967312345678", "35.", "180.5", "-181"])
    def test_invalid_longitude(self, value):
        """Test out-of-range or malformed longitudes."""
        assert validate(rule(value, Longitude())) is ERR_FORMAT

    @pytest.mark.parametrize("value", ["35.929673", "-78.948237", "180", "179.99", "-180.0"])
    def test_valid_longitude(self, value):
        """Test longitudes within [-180, 180]."""
        assert passes(value, Longitude())


class TestCharacterClasses:
    """Test the character class validators."""

    def test_alpha(self):
        """Test ASCII letters."""
        assert passes("abcXYZ", Alpha())
        assert not passes("abc1", Alpha())
        assert not passes("日本", Alpha())

    def test_alphanumeric(self):
        """Test ASCII letters and digits."""
        assert passes("abc1", Alphanumeric())
        assert not passes("abc-1", Alphanumeric())

    def test_alpha_unicode(self):
        """Test Unicode letters."""
        assert passes("日本語", AlphaUnicode())
        assert passes("naïve", AlphaUnicode())
        assert not passes("abc1", AlphaUnicode())

    def test_alphanumeric_unicode(self):
        """Test Unicode letters and digits."""
        assert passes("日本語123", AlphanumericUnicode())
        assert not passes("a_b", AlphanumericUnicode())

    def test_numeric(self):
        """Test numbers written as strings."""
        for value in ["123", "-1.5", "+3", "0.25"]:
            assert passes(value, Numeric()), value
        for value in ["1.", ".5", "abc", "1e5"]:
            assert not passes(value, Numeric()), value

    def test_ascii(self):
        """Test ASCII and printable ASCII."""
        assert passes("hello\n", ASCII())
        assert not passes("héllo", ASCII())
        assert passes("hello world", PrintableASCII())
        assert not passes("hello\n", PrintableASCII())

    def test_multibyte(self):
        """Test strings containing a non-ASCII character."""
        assert passes("héllo", MultiByte())
        assert validate(rule("hello", MultiByte())) is ERR_FORMAT


class TestColors:
    """Test the CSS color validators."""

    def test_rgb(self):
        """Test rgb() with byte or percent components."""
        assert passes("rgb(255, 0, 128)", RGB())
        assert passes("rgb(10%, 20%, 100%)", RGB())
        assert not passes("rgb(256,0,0)", RGB())
        assert not passes("rgb(10%, 20, 30)", RGB())

    def test_rgba(self):
        """Test rgba() requires an alpha component."""
        assert passes("rgba(255,255,255,0.5)", RGBA())
        assert not passes("rgba(255,255,255)", RGBA())

    def test_hsl(self):
        """Test hsl() and hsla()."""
        assert passes("hsl(360, 100%, 50%)", HSL())
        assert not passes("hsl(361, 100%, 50%)", HSL())
        assert passes("hsla(120, 50%, 50%, 1)", HSLA())
        assert not passes("hsla(120, 50%, 50%)", HSLA())


class TestEncodings:
    """Test encoded and identifier formats."""

    def test_base64(self):
        """Test standard and URL-safe base64."""
        assert passes("aGVsbG8=", Base64())
        assert not passes("aGVsbG8", Base64())
        assert not passes("ab-_", Base64())
        assert passes("ab-_", Base64URL())
        assert not passes("ab+/", Base64URL())

    def test_data_uri(self):
        """Test data URIs with and without a media type."""
        assert passes("data:text/plain;base64,SGVsbG8=", DataURI())
        assert passes("data:,Hello", DataURI())
        assert not passes("text/plain,Hi", DataURI())

    def test_bitcoin_address(self):
        """Test legacy Bitcoin addresses."""
        assert passes("1BvBMSEYstWetqTFn5Au4m4GFg7xJaNVN2", BitcoinAddress())
        assert not passes("0BvBMSEYstWetqTFn5Au4m4GFg7xJaNVN2", BitcoinAddress())
        assert not passes("1BvBM", BitcoinAddress())

    def test_isbn(self):
        """Test ISBN-10 and ISBN-13 shapes."""
        assert passes("0306406152", ISBN10())
        assert passes("030640615X", ISBN10())
        assert not passes("03064061", ISBN10())
        assert passes("9780306406157", ISBN13())
        assert not passes("9770306406157", ISBN13())

    def test_uuid(self):
        """Test generic and versioned UUIDs."""
        v3 = "a987fbc9-4bed-3078-cf07-9141ba07c9f3"
        v4 = "57b73598-8764-4ad0-a76a-679bb6640eb1"
        v5 = "987fbc97-4bed-5078-af07-9141ba07c9f3"
        for value in (v3, v4, v5):
            assert passes(value, UUID()), value
        assert not passes(v3.upper(), UUID())
        assert passes(v3, UUID3())
        assert not passes(v4, UUID3())
        assert passes(v4, UUID4())
        assert not passes(v3, UUID4())
        assert passes(v5, UUID5())
        assert not passes(v4, UUID5())


class TestURL:
    """Test the URL validator."""

    def test_any_scheme(self):
        """Test absolute URLs with any scheme."""
        assert passes("http://example.com", URL())
        assert passes("ftp://files.example.com/a.txt", URL())
        assert not passes("example.com", URL())
        assert not passes("mailto:someone@example.com", URL())

    def test_restricted_schemes(self):
        """Test scheme allow-lists, with or without a trailing ://."""
        validator = URL("http", "https://")
        assert passes("https://example.com/path?q=1", validator)
        assert passes("HTTP://example.com", validator)
        assert validate(rule("ftp://example.com", validator)) is ERR_FORMAT


class TestStringMatchers:
    """Test Regex, Prefix and Suffix."""

    def test_regex(self):
        """Test the pattern is searched in the value."""
        assert passes("12345", Regex(r"^[0-9]*$"))
        assert validate(rule("ABCDEFG", Regex(r"^[0-9]*$"))) is ERR_FORMAT
        assert passes("abc123", Regex(r"\d+"))

    def test_regex_non_string(self):
        """Test Regex on a number is a usage error."""
        with pytest.raises(WrongTypeError):
            validate(rule(12345, Regex(r"^[0-9]*$")))

    def test_constructor_arguments(self):
        """Test constructors reject non-string patterns and affixes."""
        with pytest.raises(TypeError):
            Regex(123)
        with pytest.raises(ValueError):
            Regex("[a-z")
        with pytest.raises(TypeError):
            Prefix(7)
        with pytest.raises(TypeError):
            Suffix(b".pdf")
        with pytest.raises(TypeError):
            Datetime(2006)
        with pytest.raises(TypeError):
            URL("http", 443)

    def test_prefix_suffix(self):
        """Test Prefix and Suffix."""
        assert passes("abc", Prefix("ab"))
        assert not passes("cab", Prefix("ab"))
        assert passes("report.pdf", Suffix(".pdf"))
        assert not passes("report.pdf.exe", Suffix(".pdf"))


class TestValueMatchers:
    """Test OneOf, Equal and Custom."""

    def test_one_of(self):
        """Test membership in a fixed set."""
        validator = OneOf("Male", "Female")
        assert passes("Female", validator)
        assert validate(rule("Other", validator)) is ERR_FORMAT
        assert passes("", validator)
        assert validate(rule("", Required(), validator)) is ERR_REQUIRED

    def test_one_of_requires_values(self):
        """Test OneOf without values is rejected."""
        with pytest.raises(ValueError):
            OneOf()

    def test_equal(self):
        """Test equality including the type."""
        assert passes("123", Equal("123"))
        assert not passes("124", Equal("123"))
        assert not passes(12345, Equal("12345"))
        assert passes(12345, Equal(12345))
        assert passes("", Equal("abc"))

    def test_custom(self):
        """Test a predicate with the default and a custom error."""
        even = Custom(lambda v: v % 2 == 0)
        assert passes(4, even)
        assert validate(rule(3, even)) is ERR_FORMAT

        named = Custom(lambda v: v % 2 == 0, "must be even")
        err = validate(rule(3, named))
        assert isinstance(err, ValidationError)
        assert str(err) == "must be even"
