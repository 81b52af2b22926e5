"""Tests for MAC utilities."""

import pytest

from macfmt.errors import InvalidHexCharacter, InvalidLength, MacAddressError
from macfmt.mac_utils import CasePolicy, MacAddress, Notation


class TestParse:
    def test_colon_format(self):
        mac = MacAddress.parse("aa:bb:cc:dd:ee:ff")
        assert mac.octets == (0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF)

    def test_dash_format(self):
        assert MacAddress.parse("aa-bb-cc-dd-ee-ff").octets == (0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF)

    def test_cisco_format(self):
        assert MacAddress.parse("aabb.ccdd.eeff").octets == (0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF)

    def test_no_separator(self):
        assert MacAddress.parse("aabbccddeeff").octets == (0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF)

    def test_mixed_separators_and_spaces(self):
        mac = MacAddress.parse("aa:bb-cc.dd ee:ff")
        assert mac.octets == (0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF)

    def test_case_flags(self):
        mac = MacAddress.parse("AA:bb:CC:dd:EE:ff")
        assert mac.original_case == (
            True, True, False, False, True, True, False, False, True, True, False, False,
        )

    def test_digits_are_not_uppercase(self):
        mac = MacAddress.parse("00:1A:2b:3C:4d:5E")
        assert mac.original_case == (
            False, False, False, True, False, False, False, True, False, False, False, True,
        )

    def test_invalid_length(self):
        with pytest.raises(InvalidLength) as exc_info:
            MacAddress.parse("aa:bb:cc:dd:ee")
        assert exc_info.value.expected == 12
        assert exc_info.value.actual == 10
        assert "expected 12" in str(exc_info.value)
        assert "got 10" in str(exc_info.value)

    def test_too_long(self):
        with pytest.raises(InvalidLength) as exc_info:
            MacAddress.parse("aa:bb:cc:dd:ee:ff:00")
        assert exc_info.value.actual == 14

    def test_empty_string(self):
        with pytest.raises(InvalidLength):
            MacAddress.parse("")

    def test_invalid_characters(self):
        with pytest.raises(InvalidHexCharacter) as exc_info:
            MacAddress.parse("aa:bb:cc:dd:ee:gg")
        assert exc_info.value.char == "g"
        assert exc_info.value.position == 10
        assert "'g'" in str(exc_info.value)
        assert "position 10" in str(exc_info.value)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            MacAddress.parse("GG:HH:II:JJ:KK:LL")
        with pytest.raises(MacAddressError):
            MacAddress.parse("1234")


class TestFormat:
    @pytest.fixture
    def mac(self):
        return MacAddress.parse("aabbccddeeff")

    def test_standard(self, mac):
        assert mac.format(Notation.STANDARD) == "aa:bb:cc:dd:ee:ff"

    def test_cisco(self, mac):
        assert mac.format(Notation.CISCO) == "aabb.ccdd.eeff"

    def test_windows(self, mac):
        assert mac.format(Notation.WINDOWS) == "aa-bb-cc-dd-ee-ff"

    def test_bare(self):
        assert MacAddress.parse("aa:bb:cc:dd:ee:ff").format(Notation.BARE) == "aabbccddeeff"

    def test_str_is_standard(self, mac):
        assert str(mac) == "aa:bb:cc:dd:ee:ff"

    def test_all_zeros(self):
        mac = MacAddress.parse("00:00:00:00:00:00")
        assert mac.format(Notation.STANDARD) == "00:00:00:00:00:00"
        assert mac.format(Notation.CISCO) == "0000.0000.0000"

    def test_all_fs(self):
        mac = MacAddress.parse("ff:ff:ff:ff:ff:ff")
        assert mac.format(Notation.CISCO) == "ffff.ffff.ffff"
        assert mac.format(Notation.CISCO, CasePolicy.UPPER) == "FFFF.FFFF.FFFF"


class TestCasePolicy:
    def test_preserve_round_trip(self):
        mac = MacAddress.parse("AA:bb:CC:dd:EE:ff")
        assert mac.format(Notation.STANDARD, CasePolicy.PRESERVE) == "AA:bb:CC:dd:EE:ff"
        assert mac.format(Notation.CISCO, CasePolicy.PRESERVE) == "AAbb.CCdd.EEff"

    def test_preserve_within_byte(self):
        mac = MacAddress.parse("Ab:cD:01:23:eF:9a")
        assert mac.format(Notation.WINDOWS) == "Ab-cD-01-23-eF-9a"

    def test_force_lowercase(self):
        mac = MacAddress.parse("AA:BB:CC:DD:EE:FF")
        assert mac.format(Notation.STANDARD, CasePolicy.LOWER) == "aa:bb:cc:dd:ee:ff"
        assert mac.format(Notation.CISCO, CasePolicy.LOWER) == "aabb.ccdd.eeff"

    def test_force_uppercase(self):
        mac = MacAddress.parse("aa:bb:cc:dd:ee:ff")
        assert mac.format(Notation.STANDARD, CasePolicy.UPPER) == "AA:BB:CC:DD:EE:FF"
        assert mac.format(Notation.CISCO, CasePolicy.UPPER) == "AABB.CCDD.EEFF"

    def test_force_upper_idempotent(self):
        first = MacAddress.parse("aA:b1:Cc:dd:0e:Ff").format(Notation.STANDARD, CasePolicy.UPPER)
        second = MacAddress.parse(first).format(Notation.STANDARD, CasePolicy.UPPER)
        assert first == second == "AA:B1:CC:DD:0E:FF"

    @pytest.mark.parametrize(
        "value",
        ["0a:1b:2c:3d:4e:5f", "0a-1b-2c-3d-4e-5f", "0a1b.2c3d.4e5f", "0a1b2c3d4e5f"],
    )
    def test_notation_equivalence(self, value):
        mac = MacAddress.parse(value)
        assert mac.format(Notation.STANDARD) == "0a:1b:2c:3d:4e:5f"
        assert mac == MacAddress.parse("0a:1b:2c:3d:4e:5f")
