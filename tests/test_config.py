from nomina.config import Settings, env_files
from nomina.constants import PAYROLL_CONSTANTS, currency_config


def test_policy_constants_defaults():
    assert PAYROLL_CONSTANTS.overtime_factor == 1.5
    assert PAYROLL_CONSTANTS.double_time_factor == 2.0
    assert PAYROLL_CONSTANTS.aguinaldo_days_default == 15
    assert PAYROLL_CONSTANTS.vacation_bonus_percentage == 0.25
    assert PAYROLL_CONSTANTS.regular_hours_weekly == 40
    assert PAYROLL_CONSTANTS.regular_hours_daily == 8
    assert PAYROLL_CONSTANTS.timezone == "America/Monterrey"


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("NOMINA_LOCALE", "en-US")
    monkeypatch.setenv("NOMINA_CURRENCY_CODE", " usd ")
    monkeypatch.setenv("NOMINA_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.locale == "en-US"
    assert settings.log_level == "DEBUG"
    config = currency_config(settings)
    assert config.code == "USD"
    assert config.locale == "en-US"
    assert config.symbol == "$"


def test_currency_config_defaults(monkeypatch):
    for name in ("NOMINA_LOCALE", "NOMINA_CURRENCY_CODE", "NOMINA_TIMEZONE"):
        monkeypatch.delenv(name, raising=False)

    config = currency_config(Settings())

    assert config.code == "MXN"
    assert config.locale == "es-MX"
    assert config.timezone == "America/Monterrey"


def test_env_files_come_from_the_given_directory(tmp_path, monkeypatch):
    monkeypatch.setenv("NOMINA_ENV", "prod")
    (tmp_path / ".env").write_text("NOMINA_LOCALE=en-US\n")
    (tmp_path / ".env.prod").write_text("NOMINA_CURRENCY_CODE=usd\n")

    files = env_files(tmp_path)

    assert files == (tmp_path / ".env", tmp_path / ".env.prod")


def test_env_files_empty_without_dotenv(tmp_path):
    assert env_files(tmp_path) == ()
