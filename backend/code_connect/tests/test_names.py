import pytest

from code_connect.service.names import (
    is_binary_boolean_variant,
    normalize_component_name,
    normalize_property_name,
    to_code_property_name,
    to_value_slug,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Label#12:34", "Label"),
        ("Size#12:3", "Size"),
        ("Icon#1", "Icon"),
        ("Label", "Label"),
        ("Has icon", "Has icon"),
    ],
)
def test_normalize_property_name(raw, expected):
    assert normalize_property_name(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Disabled", "disabled"),
        ("Size#12:3", "size"),
        ("Has Icon#1:2", "hasIcon"),
        ("Button-Type!", "buttonType"),
        ("HTML Label", "htmlLabel"),
        ("isDisabled", "isDisabled"),
        ("Icon 2", "icon2"),
        ("!!!#1:2", "prop"),
        ("", "prop"),
        ("2 Columns", "_2Columns"),
    ],
)
def test_to_code_property_name(raw, expected):
    assert to_code_property_name(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Small", "small"),
        ("Extra Large", "extra-large"),
        ("Primary/Hover", "primary-hover"),
    ],
)
def test_to_value_slug(raw, expected):
    assert to_value_slug(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("button-primary", "ButtonPrimary"),
        ("MyHTMLButton", "MyHTMLButton"),
        ("icon button", "IconButton"),
        ("2col", "_2col"),
        ("", "Component"),
    ],
)
def test_normalize_component_name(raw, expected):
    assert normalize_component_name(raw) == expected


@pytest.mark.parametrize(
    "options",
    [
        ["true", "false"],
        ["Yes", "No"],
        ["ON", "off"],
        ["True", "Off"],
    ],
)
def test_binary_boolean_variant(options):
    assert is_binary_boolean_variant(options)


@pytest.mark.parametrize(
    "options",
    [
        ["Small", "Large"],
        ["true"],
        ["true", "false", "yes"],
        ["true", "maybe"],
        [],
        None,
    ],
)
def test_not_binary_boolean_variant(options):
    assert not is_binary_boolean_variant(options)
