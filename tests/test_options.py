from rhoc_admin.options import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    ListDeploymentsOptions,
    ListOptions,
    optional_bool,
    optional_int,
    optional_string,
)


def test_optional_string_empty_is_none():
    assert optional_string("") is None


def test_optional_string_keeps_value():
    assert optional_string("name asc") == "name asc"


def test_optional_int_renders_decimal():
    assert optional_int(42) == str(42)


def test_optional_bool_values():
    assert optional_bool(True) == "true"
    assert optional_bool(False) == "false"


def test_list_options_defaults():
    opts = ListOptions()
    assert opts.page == DEFAULT_PAGE_NUMBER
    assert opts.limit == DEFAULT_PAGE_SIZE
    assert opts.all_pages is False
    assert opts.order_by == ""
    assert opts.search == ""


def test_deployment_options_extend_list_options():
    opts = ListDeploymentsOptions(page=3, channel_update=True)
    assert isinstance(opts, ListOptions)
    assert opts.page == 3
    assert opts.channel_update is True
    assert opts.dangling_deployments is False