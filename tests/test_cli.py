import pytest
import typer
from typer.testing import CliRunner

from proportional_autoscaler import __version__
from proportional_autoscaler.cli.main import app, build_config, parse_default_params_option
from proportional_autoscaler.options.params import ConfigMapData


@pytest.fixture
def runner():
    return CliRunner()


def test_version(runner):
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_valid_flags(runner):
    result = runner.invoke(
        app,
        ["--target", "Deployment/DNS", "--configmap", "dns-autoscaler", "--namespace", "kube-system"],
        env={"MY_POD_NAMESPACE": None},
    )
    assert result.exit_code == 0, result.output
    assert "deployment/dns" in result.output
    assert "dns-autoscaler" in result.output


def test_namespace_from_environment(runner):
    result = runner.invoke(
        app,
        ["--target", "deployment/dns", "--configmap", "dns-autoscaler"],
        env={"MY_POD_NAMESPACE": "from-env"},
    )
    assert result.exit_code == 0, result.output
    assert "from-env" in result.output


def test_missing_namespace_fails(runner):
    result = runner.invoke(
        app,
        ["--target", "deployment/dns", "--configmap", "dns-autoscaler"],
        env={"MY_POD_NAMESPACE": None},
    )
    assert result.exit_code == 1
    assert "--namespace parameter not set and failed to fallback" in result.output
    assert "failed to validate all input parameters" in result.output


def test_every_violation_is_logged(runner):
    result = runner.invoke(app, ["--poll-period-seconds", "0"], env={"MY_POD_NAMESPACE": None})
    assert result.exit_code == 1
    for message in [
        "--target parameter cannot be empty",
        "--configmap parameter cannot be empty",
        "--namespace parameter not set and failed to fallback",
        "--poll-period-seconds cannot be less than 1",
    ]:
        assert message in result.output


def test_default_params(runner):
    result = runner.invoke(
        app,
        [
            "--target", "deployment/dns",
            "--configmap", "dns-autoscaler",
            "--namespace", "kube-system",
            "--default-params", '{"linear": {"coresPerReplica": 256}}',
        ],
    )
    assert result.exit_code == 0, result.output
    assert "coresPerReplica" in result.output


def test_malformed_default_params_is_usage_error(runner):
    result = runner.invoke(
        app,
        ["--target", "deployment/dns", "--configmap", "cm", "--namespace", "ns", "--default-params", "{"],
    )
    assert result.exit_code == 2


def test_flags_override_config_file(runner, tmp_path):
    path = tmp_path / "autoscaler.yaml"
    path.write_text("target: deployment/from-file\nconfigmap: file-cm\nnamespace: file-ns\n")

    result = runner.invoke(app, ["--config", str(path), "--configmap", "flag-cm"])
    assert result.exit_code == 0, result.output
    assert "deployment/from-file" in result.output
    assert "flag-cm" in result.output
    assert "file-cm" not in result.output


def test_missing_config_file(runner, tmp_path):
    result = runner.invoke(app, ["--config", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_build_config_precedence(tmp_path):
    path = tmp_path / "autoscaler.yaml"
    path.write_text("namespace: file-ns\npoll-period-seconds: 30\n")

    config = build_config(path, {"poll_period_seconds": 5, "target": None}, environ={"MY_POD_NAMESPACE": "env-ns"})
    assert config.namespace == "file-ns"
    assert config.poll_period_seconds == 5
    assert config.target == ""


def test_build_config_without_file():
    config = build_config(None, {"target": "deployment/x"}, environ={"MY_POD_NAMESPACE": "env-ns"})
    assert config.namespace == "env-ns"
    assert config.target == "deployment/x"


def test_malformed_default_params_reports_usage(runner):
    result = runner.invoke(app, ["--default-params", '{"a": '])
    assert result.exit_code == 2
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_default_params_option_parser():
    data = parse_default_params_option('{"a": [1]}')
    assert isinstance(data, ConfigMapData)
    assert data == {"a": "[1]"}


def test_default_params_option_parser_rejects_bad_json():
    with pytest.raises(typer.BadParameter, match="invalid default params"):
        parse_default_params_option("{")


def test_unknown_log_level_is_usage_error(runner):
    result = runner.invoke(app, ["--version", "--log-level", "LOUD"])
    assert result.exit_code == 2
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_log_level_is_case_insensitive(runner):
    result = runner.invoke(app, ["--version", "--log-level", "debug"])
    assert result.exit_code == 0, result.output
    assert __version__ in result.output
