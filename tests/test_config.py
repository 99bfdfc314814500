# tests/test_config.py
import pytest

from configurations import BrowserConfig, ConfigFactory, FeedConfig, ListingConfig, get_config
from exceptions import ConfigurationError


def test_testing_config(testing_config):
    assert testing_config.environment == "testing"
    assert testing_config.feed.base_url == "http://feed.test"
    assert testing_config.listing.load_more_settle_delay == 0.0
    assert testing_config.validate() is True


@pytest.mark.parametrize("environment", ["development", "Testing", "PRODUCTION"])
def test_get_config_known(environment):
    assert get_config(environment).environment == environment.lower()


def test_get_config_unknown():
    with pytest.raises(ConfigurationError):
        get_config("staging")


def test_get_config_reads_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "testing")

    assert get_config().environment == "testing"


def test_feed_config_from_environment(monkeypatch):
    monkeypatch.setenv("FEED_BASE_URL", "http://mirror.test/")
    monkeypatch.setenv("FEED_TIMEOUT", "oops")

    config = FeedConfig.from_environment(max_retries=5)

    assert config.base_url == "http://mirror.test"
    assert config.timeout == 10.0
    assert config.max_retries == 5


def test_url_for():
    config = FeedConfig(base_url="http://feed.test/")

    assert config.url_for("/api/server_list") == "http://feed.test/api/server_list"
    assert config.url_for("http://x.test/a") == "http://x.test/a"


def test_custom_overrides():
    config = ConfigFactory.custom(
        "testing", base_url="http://other.test/", timeout=4.0, log_level="DEBUG", listing_server_page_size=50
    )

    assert config.feed.base_url == "http://other.test"
    assert config.feed.timeout == 4.0
    assert config.log_level == "DEBUG"
    assert config.listing.server_page_size == 50
    assert config.environment == "custom-testing"


@pytest.mark.parametrize(
    "config",
    [
        BrowserConfig(feed=FeedConfig(timeout=0)),
        BrowserConfig(feed=FeedConfig(max_retries=0)),
        BrowserConfig(listing=ListingConfig(server_page_size=0)),
        BrowserConfig(listing=ListingConfig(load_more_settle_delay=-1)),
        BrowserConfig(log_level="LOUD"),
    ],
)
def test_validate_rejects(config):
    with pytest.raises(ConfigurationError):
        config.validate()
