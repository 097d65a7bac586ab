import argparse

import pytest

from rhoc_admin.cmdutil import (
    add_all_pages,
    add_channel_update,
    add_cluster_id,
    add_dangling_deployments,
    add_force,
    add_id,
    add_limit,
    add_order_by,
    add_output,
    add_page,
    add_revision,
    add_search,
    add_yes,
    list_options_from,
    prompt_confirm,
    valid_outputs,
    validate_output,
)
from rhoc_admin.options import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
    ListDeploymentsOptions,
    ListOptions,
)


def _list_parser():
    parser = argparse.ArgumentParser()
    add_output(parser)
    add_page(parser)
    add_limit(parser)
    add_all_pages(parser)
    add_order_by(parser)
    add_search(parser)
    return parser


def test_valid_outputs_end_with_table_formats():
    outputs = valid_outputs()
    assert outputs[-2:] == ["wide", "csv"]
    assert "json" in outputs


def test_validate_output_accepts_known_and_empty():
    assert validate_output("") == ""
    assert validate_output("yaml") == "yaml"


def test_validate_output_rejects_unknown():
    with pytest.raises(ValueError):
        validate_output("xml")


def test_prompt_confirm_yes():
    assert prompt_confirm("Delete?", ask=lambda _: "y") is True


def test_prompt_confirm_default_no():
    assert prompt_confirm("Delete?", ask=lambda _: "") is False


def test_prompt_confirm_reasks_on_unclear_answer():
    answers = iter(["maybe", "yes"])
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return next(answers)

    assert prompt_confirm("Delete?", ask=ask) is True
    assert len(prompts) == 2
    assert all(p.startswith("Delete?") for p in prompts)


def test_list_flags_defaults():
    args = _list_parser().parse_args([])
    assert args.output == ""
    assert args.page == DEFAULT_PAGE_NUMBER
    assert args.limit == DEFAULT_PAGE_SIZE
    assert args.all_pages is False


def test_invalid_output_flag_exits():
    with pytest.raises(SystemExit):
        _list_parser().parse_args(["-o", "xml"])


def test_list_options_from_parsed_flags():
    args = _list_parser().parse_args(
        ["-p", "2", "-l", "10", "--all-pages", "--order-by", "name", "--search", "name like 'a%'"]
    )
    assert list_options_from(args) == ListOptions(
        page=2, limit=10, all_pages=True, order_by="name", search="name like 'a%'"
    )


def test_list_options_from_deployment_flags():
    parser = _list_parser()
    add_channel_update(parser)
    add_dangling_deployments(parser)
    opts = list_options_from(parser.parse_args(["--channel-update"]))
    assert isinstance(opts, ListDeploymentsOptions)
    assert opts.channel_update is True
    assert opts.dangling_deployments is False


def test_required_id_missing_exits():
    parser = argparse.ArgumentParser()
    add_id(parser, required=True)
    with pytest.raises(SystemExit):
        parser.parse_args([])


def test_short_flags():
    parser = argparse.ArgumentParser()
    add_cluster_id(parser)
    add_force(parser)
    add_yes(parser)
    add_revision(parser)
    args = parser.parse_args(["-c", "cl-1", "-f", "-y", "--revision", "7"])
    assert args.cluster_id == "cl-1"
    assert args.force is True
    assert args.yes is True
    assert args.revision == 7