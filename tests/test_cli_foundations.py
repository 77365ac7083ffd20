import re
from types import SimpleNamespace

import pytest

from src.chain.processors import ErrorLogProcessor, InfoLogProcessor
from src.config import get_default_config_path
from src.main import bootstrap_runtime, main, parse_args


def test_parse_args_uses_default_config_when_not_provided():
    args = parse_args([])
    assert args.config == str(get_default_config_path())


def test_bootstrap_runtime_builds_default_chain(restore_root_logging):
    args = SimpleNamespace(config=str(get_default_config_path()))
    context = bootstrap_runtime(args)

    assert isinstance(context.chain, InfoLogProcessor)
    assert len(context.config.messages) == 3
    assert re.match(r"\d{8}_\d{6}", context.run_id)


def test_bootstrap_runtime_honours_configured_order(write_config, restore_root_logging):
    config_path = write_config({"chain": {"order": ["ERROR", "INFO"]}})

    context = bootstrap_runtime(SimpleNamespace(config=str(config_path)))

    assert isinstance(context.chain, ErrorLogProcessor)
    assert [level.name for level in context.chain.levels()] == ["ERROR", "INFO"]


def test_main_prints_default_scenario(capsys, restore_root_logging):
    main([])

    assert capsys.readouterr().out == (
        "Info Log: This is a INFO Log\n"
        "Debug Log: This is a DEBUG Log\n"
        "Error Log: This is a ERROR Log\n"
    )


def test_main_skips_levels_missing_from_chain(write_config, capsys, restore_root_logging):
    config_path = write_config({"chain": {"order": ["DEBUG"]}})

    main(["--config", str(config_path)])

    assert capsys.readouterr().out == "Debug Log: This is a DEBUG Log\n"


def test_main_exits_with_one_on_bad_config(write_config, capsys, restore_root_logging):
    config_path = write_config({"messages": [{"level": "FATAL", "text": "x"}]})

    with pytest.raises(SystemExit) as exit_info:
        main(["--config", str(config_path)])

    assert exit_info.value.code == 1
    assert capsys.readouterr().out == ""
