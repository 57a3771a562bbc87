import pytest

from ftl_i18n import i18n

EN_US = """\
hello = Hello
welcome_message = Welcome
greeting = Good { $time }, { $user }!
user_info = User { $user } logged in this { $time }
items = { $count } items in { $place }
-brand = Chronicle
about = About { -brand }
login = Log in
    .title = Sign in to { -brand }
    .placeholder = Email address
"""

FR_FR = """\
hello = Bonjour
greeting = Bon { $time }, { $user } !
"""


@pytest.fixture
def locales_dir(tmp_path):
    root = tmp_path / "locales"
    (root / "en-US").mkdir(parents=True)
    (root / "en-US" / "main.ftl").write_text(EN_US, encoding="utf-8")
    (root / "fr-FR").mkdir()
    (root / "fr-FR" / "main.ftl").write_text(FR_FR, encoding="utf-8")
    return root


@pytest.fixture
def fresh_i18n(monkeypatch):
    """Drop any already built instance so the next lookup reads the environment."""
    monkeypatch.setattr(i18n, "_instance", None)
    monkeypatch.delenv("I18N_ID", raising=False)
    monkeypatch.delenv("I18N_DIR", raising=False)
    return i18n


@pytest.fixture
def configured(fresh_i18n, locales_dir, monkeypatch):
    monkeypatch.setenv("I18N_DIR", str(locales_dir))
    return fresh_i18n
