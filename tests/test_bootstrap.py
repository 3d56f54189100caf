import main
from config import Settings
from services.faq_service import get_faqs
from services.user_service import count_users


def test_bootstrap_prepares_core(tmp_path, monkeypatch):
    monkeypatch.setattr(main, "setup_logging", lambda settings: None)
    settings = Settings(
        data_dir=str(tmp_path / "docs"),
        log_dir=str(tmp_path / "logs"),
    )

    context = main.bootstrap(settings)
    try:
        assert context.storage.is_open
        assert (tmp_path / "docs" / "RathiDental.db").exists()
        assert count_users(context.storage) == 2
        assert get_faqs(context.storage) == []
        for name in ("Team", "Testimonials", "Services"):
            assert (tmp_path / "docs" / name).is_dir()
        assert context.auth_session.current_user is None
    finally:
        context.close()


def test_bootstrap_restores_session(tmp_path, monkeypatch):
    monkeypatch.setattr(main, "setup_logging", lambda settings: None)
    settings = Settings(data_dir=str(tmp_path / "docs"), log_dir=str(tmp_path / "logs"))

    first = main.bootstrap(settings)
    first.auth_session.login("user", "user")
    first.close()

    second = main.bootstrap(settings)
    try:
        assert second.auth_session.current_user.email == "user"
    finally:
        second.close()
