"""Tests for configuration and scheme catalog loading."""

import logging

import pytest
import structlog

from store_pricing.config import (
    LOG_LEVEL_ENV,
    SCHEMES_FILE_ENV,
    configure_logging,
    get_log_level,
    load_schemes,
    load_schemes_from_env,
    scheme_from_config,
    schemes_from_config,
)
from store_pricing.errors import ConfigurationError
from store_pricing.items import Item
from store_pricing.register import Register
from store_pricing.schemes import (
    AmountOffScheme,
    CouponScheme,
    GroupedScheme,
    MultiBuyScheme,
    RainCheckScheme,
)

CATALOG = """\
schemes:
  - type: multi_buy
    target: Beans
  - type: grouped
    group_a: [Ketchup]
    group_b: [Beer]
    percent: 0.10
  - type: coupon
    target: Beans
    percent: 0.15
  - type: amount_off
    target: Pencil
    amount_cents: 25
  - type: rain_check
    target: Beans
    price_cents: 150
"""


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "schemes.yaml"
    path.write_text(CATALOG, encoding="utf-8")
    return path


class TestLogLevel:
    def test_defaults_to_info(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert get_log_level() == logging.INFO

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert get_log_level() == logging.DEBUG

    def test_unknown_name_falls_back(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        assert get_log_level() == logging.INFO

    def test_configure_logging_filters_below_level(self, capsys):
        configure_logging(logging.WARNING)
        log = structlog.get_logger()
        log.info("quiet")
        log.warning("loud", code=7)

        out = capsys.readouterr().out
        assert "quiet" not in out
        assert '"event": "loud"' in out
        assert '"level": "warning"' in out


class TestSchemeFromConfig:
    def test_multi_buy_defaults_group_size(self):
        assert scheme_from_config({"type": "multi_buy", "target": "Beans"}) == MultiBuyScheme("Beans")

    def test_multi_buy_group_size(self):
        scheme = scheme_from_config({"type": "multi_buy", "target": "Soda", "group_size": 2})
        assert scheme == MultiBuyScheme("Soda", 2)

    def test_grouped_accepts_single_name(self):
        scheme = scheme_from_config(
            {"type": "grouped", "group_a": "Ketchup", "group_b": ["Beer"], "percent": 0.1}
        )
        assert scheme == GroupedScheme(["Ketchup"], ["Beer"], 0.1)

    def test_unknown_type(self):
        with pytest.raises(ConfigurationError, match="Unknown scheme type: 'bogo'"):
            scheme_from_config({"type": "bogo", "target": "Beans"})

    def test_missing_setting(self):
        with pytest.raises(ConfigurationError, match="Missing scheme setting: 'percent'"):
            scheme_from_config({"type": "coupon", "target": "Beans"})

    def test_bad_value(self):
        with pytest.raises(ConfigurationError, match="Invalid rain_check scheme"):
            scheme_from_config({"type": "rain_check", "target": "Beans", "price_cents": "cheap"})

    def test_validation_errors_pass_through(self):
        with pytest.raises(ConfigurationError, match="Percent must be between 0 and 1"):
            scheme_from_config({"type": "coupon", "target": "Beans", "percent": 15})


class TestSchemesFromConfig:
    def test_requires_schemes_list(self):
        with pytest.raises(ConfigurationError):
            schemes_from_config({"schemes": "multi_buy"})
        with pytest.raises(ConfigurationError):
            schemes_from_config(None)

    def test_rejects_non_mapping_entry(self):
        with pytest.raises(ConfigurationError):
            schemes_from_config({"schemes": ["multi_buy"]})

    def test_empty_list(self):
        assert schemes_from_config({"schemes": []}) == []


class TestLoadSchemes:
    def test_loads_in_file_order(self, catalog_file):
        assert load_schemes(catalog_file) == [
            MultiBuyScheme("Beans"),
            GroupedScheme(["Ketchup"], ["Beer"], 0.10),
            CouponScheme("Beans", 0.15),
            AmountOffScheme("Pencil", 25),
            RainCheckScheme("Beans", 150),
        ]

    def test_unparseable_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("schemes: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Cannot parse scheme catalog"):
            load_schemes(path)

    def test_from_env_unset(self, monkeypatch):
        monkeypatch.delenv(SCHEMES_FILE_ENV, raising=False)
        assert load_schemes_from_env() == []

    def test_from_env(self, monkeypatch, catalog_file):
        monkeypatch.setenv(SCHEMES_FILE_ENV, str(catalog_file))
        assert len(load_schemes_from_env()) == 5


class TestRegisterFromConfig:
    def test_explicit_path(self, catalog_file):
        register = Register.from_config(catalog_file)
        for _ in range(3):
            register.scan(Item("Beans", 200))
        receipt = register.total()
        # multi-buy -200, coupon -30, rain check -50
        assert receipt.total() == 600 - 200 - 30 - 50

    def test_environment(self, monkeypatch, catalog_file):
        monkeypatch.setenv(SCHEMES_FILE_ENV, str(catalog_file))
        assert len(Register.from_config().schemes) == 5

    def test_no_catalog(self, monkeypatch):
        monkeypatch.delenv(SCHEMES_FILE_ENV, raising=False)
        assert Register.from_config().schemes == ()


class TestCatalogErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read scheme catalog"):
            load_schemes(tmp_path / "absent.yaml")

    def test_missing_file_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv(SCHEMES_FILE_ENV, str(tmp_path / "absent.yaml"))
        with pytest.raises(ConfigurationError):
            load_schemes_from_env()

    @pytest.mark.parametrize("value", [".nan", ".inf"])
    def test_non_finite_percent(self, tmp_path, value):
        path = tmp_path / "schemes.yaml"
        path.write_text(
            f"schemes:\n  - type: coupon\n    target: Beans\n    percent: {value}\n",
            encoding="utf-8",
        )
        with pytest.raises(ConfigurationError, match="Percent must be between 0 and 1"):
            load_schemes(path)
