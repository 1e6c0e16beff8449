"""Tests for the command-line interface."""

import json

import pytest
import yaml

from patternkit.cli.main import main, parse_args


def _run(capsys, *argv):
    exit_code = main(list(argv))
    captured = capsys.readouterr()
    return exit_code, captured.out, captured.err


class TestParseArgs:
    """Test argument parsing."""

    def test_global_options(self):
        args = parse_args(["--seed", "3", "--format", "table", "gameplay", "random", "--count", "2"])
        assert args.seed == 3
        assert args.format == "table"
        assert args.resource == "gameplay"
        assert args.action == "random"
        assert args.count == 2

    def test_repeated_toppings(self):
        args = parse_args(["pizza", "--topping", "cheese", "--topping", "chicken"])
        assert args.topping == ["cheese", "chicken"]

    def test_unknown_topping_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["pizza", "--topping", "pineapple"])


class TestMain:
    """Test command execution end to end."""

    def test_gameplay_mission(self, capsys):
        exit_code, out, _ = _run(capsys, "gameplay", "mission", "final")
        assert exit_code == 0
        assert json.loads(out)["products"][0]["variant"] == "RainyGameplay"

    def test_gameplay_mission_uses_configured_default(self, capsys, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"defaults": {"mission": "siege"}}))
        exit_code, out, _ = _run(capsys, "--config", str(config_file), "gameplay", "mission")
        assert exit_code == 0
        assert json.loads(out)["products"][0]["variant"] == "SnowyGameplay"

    def test_gameplay_random_is_reproducible_with_seed(self, capsys):
        _, first, _ = _run(capsys, "--seed", "7", "gameplay", "random", "--count", "5")
        _, second, _ = _run(capsys, "--seed", "7", "gameplay", "random", "--count", "5")
        assert first == second
        assert len(json.loads(first)["products"]) == 5

    def test_vehicle_truck(self, capsys):
        exit_code, out, _ = _run(capsys, "vehicle", "truck", "--payload-tons", "2")
        product = json.loads(out)["products"][0]
        assert exit_code == 0
        assert product["variant"] == "Truck"
        assert product["cost"] == 5600 + 12000 + 2 * 800

    def test_vehicle_invalid_parameter(self, capsys):
        exit_code, _, err = _run(capsys, "vehicle", "car", "--seats", "0")
        assert exit_code == 1
        assert "seats must be a positive integer" in err

    def test_scene_create_named_factory(self, capsys):
        exit_code, out, _ = _run(capsys, "scene", "create", "sunny-morning")
        assert exit_code == 0
        assert json.loads(out)["products"][0]["combination"] == "sunny-morning"

    def test_scene_create_any_valid_combination(self, capsys):
        exit_code, out, _ = _run(capsys, "scene", "create", "foggy-night")
        assert exit_code == 0
        assert json.loads(out)["products"][0]["combination"] == "foggy-night"

    def test_scene_create_invalid_combination(self, capsys):
        exit_code, out, err = _run(capsys, "scene", "create", "sunny-night")
        assert exit_code == 1
        assert out == ""
        assert "not a valid scene combination" in err

    def test_scene_random(self, capsys):
        exit_code, out, _ = _run(capsys, "--seed", "1", "scene", "random", "--count", "4")
        assert exit_code == 0
        assert len(json.loads(out)["products"]) == 4

    def test_scene_list(self, capsys):
        exit_code, out, _ = _run(capsys, "scene", "list")
        combinations = json.loads(out)["combinations"]
        assert exit_code == 0
        assert len(combinations) == 11
        named = {c["combination"]: c["dedicated_factory"] for c in combinations}
        assert named["rainy-night"] == "RainyNightFactory"
        assert named["rainy-evening"] == ""

    def test_pizza(self, capsys):
        exit_code, out, _ = _run(capsys, "pizza", "--topping", "cheese", "--topping", "chicken")
        product = json.loads(out)["products"][0]
        assert exit_code == 0
        assert product["cost"] == 87
        assert product["description"] == "pizza with cheese with chicken"

    def test_pizza_yaml_output(self, capsys):
        exit_code, out, _ = _run(capsys, "--format", "yaml", "pizza", "--base", "calzone")
        assert exit_code == 0
        assert yaml.safe_load(out)["products"][0]["description"] == "calzone"

    def test_table_output(self, capsys):
        exit_code, out, _ = _run(capsys, "--format", "table", "factories")
        assert exit_code == 0
        assert "sunny-morning" in out
        assert "Factories" in out

    def test_missing_resource(self, capsys):
        exit_code, _, err = _run(capsys)
        assert exit_code == 1
        assert "No resource specified" in err

    def test_missing_action(self, capsys):
        exit_code, _, err = _run(capsys, "scene")
        assert exit_code == 1
        assert "No action specified" in err

    def test_missing_config_file(self, capsys, tmp_path):
        exit_code, _, err = _run(capsys, "--config", str(tmp_path / "nope.json"), "factories")
        assert exit_code == 1
        assert "Configuration file not found" in err

    @pytest.mark.parametrize("argv", [
        ["gameplay", "random", "--count", "0"],
        ["gameplay", "random", "--count", "-2"],
        ["scene", "random", "--count", "0"],
        ["scene", "random", "--count", "-2"],
    ])
    def test_non_positive_count_rejected(self, capsys, argv):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 2
        assert "must be at least 1" in capsys.readouterr().err

    def test_count_defaults_to_configuration(self, capsys, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"selection": {"random_count": 3}}))
        exit_code, out, _ = _run(capsys, "--config", str(config_file), "gameplay", "random")
        assert exit_code == 0
        assert len(json.loads(out)["products"]) == 3

    def test_unwritable_log_directory(self, capsys, tmp_path, monkeypatch):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        monkeypatch.setenv("PATTERNKIT_LOG_DESTINATION", "file")
        monkeypatch.setenv("PATTERNKIT_LOG_DIR", str(blocker / "sub"))
        exit_code, out, err = _run(capsys, "pizza")
        assert exit_code == 1
        assert out == ""
        assert "Cannot open log file" in err

    def test_unexpected_error(self, capsys, monkeypatch):
        def fail(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("patternkit.cli.main.execute_command", fail)
        exit_code, _, err = _run(capsys, "factories")
        assert exit_code == 1
        assert "Unexpected error: boom" in err
