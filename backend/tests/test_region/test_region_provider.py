"""Tests for the company name → registration code provider."""

import pytest

from sealforge.region import RegionCodeProvider, is_valid_registration_number
from sealforge.region.provider import mod11_10_check_digit


@pytest.mark.parametrize(
    "name,prefix",
    [
        ("北京星河科技有限公司", "110000"),
        ("上海某某贸易有限公司", "310000"),
        ("中国上海某某贸易有限公司", "310000"),
        ("广东省深圳市某某科技有限公司", "440300"),
        ("广东某某实业有限公司", "440000"),
        ("深圳市某某科技有限公司", "440300"),
        ("杭州某某网络有限公司", "330100"),
        ("内蒙古自治区呼和浩特市某某公司", "150100"),
        ("新疆维吾尔自治区乌鲁木齐某某公司", "650100"),
    ],
)
def test_division_prefix(region_provider, name, prefix):
    code = region_provider(name)
    assert code.startswith(prefix)
    assert len(code) == 15
    assert code.isdigit()


@pytest.mark.parametrize("name", ["未知企业", "ACME TRADING", "", "   "])
def test_unknown_region_returns_empty(region_provider, name):
    assert region_provider(name) == ""


def test_codes_are_deterministic():
    name = "深圳市某某科技有限公司"
    assert RegionCodeProvider()(name) == RegionCodeProvider()(name)


def test_serial_depends_on_name(region_provider):
    a = region_provider("深圳市甲科技有限公司")
    b = region_provider("深圳市乙科技有限公司")
    assert a[:6] == b[:6]
    assert a != b


def test_check_digit_is_valid(region_provider):
    code = region_provider("北京星河科技有限公司")
    assert is_valid_registration_number(code)
    wrong = code[:-1] + str((int(code[-1]) + 1) % 10)
    assert not is_valid_registration_number(wrong)


def test_check_digit_closes_the_mod11_10_chain():
    body = "44030000000001"
    check = mod11_10_check_digit(body)
    p = 10
    for ch in body:
        p = (((p + int(ch)) % 10 or 10) * 2) % 11
    assert (p + check) % 10 == 1


def test_malformed_numbers_rejected():
    assert not is_valid_registration_number("12345")
    assert not is_valid_registration_number("44030000000001X")


def test_custom_tables():
    provider = RegionCodeProvider(provinces={"测试": "990000"}, cities={})
    assert provider("测试公司").startswith("990000")
    assert provider("北京公司") == ""
