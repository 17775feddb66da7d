from pathlib import Path

import pytest

from src.platform.config.core_setting import Settings
from src.platform.constant.path import BASE_DIR


@pytest.mark.unit
class TestCorsOriginsSetting:
    @pytest.fixture(autouse=True)
    def _clear_cors_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('BACKEND_CORS_ORIGINS', raising=False)

    def test_comma_separated_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', 'a.com, b.com')

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.BACKEND_CORS_ORIGINS == ['a.com', 'b.com']

    def test_json_list_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', '["a.com", "b.com"]')

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.BACKEND_CORS_ORIGINS == ['a.com', 'b.com']

    def test_comma_separated_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / '.env'
        env_file.write_text('BACKEND_CORS_ORIGINS=http://localhost:3000,http://localhost:5173\n')

        settings = Settings(_env_file=env_file)  # type: ignore[call-arg]

        assert settings.BACKEND_CORS_ORIGINS == ['http://localhost:3000', 'http://localhost:5173']

    def test_shipped_env_example_loads(self) -> None:
        settings = Settings(_env_file=BASE_DIR / '.env.example')  # type: ignore[call-arg]

        assert settings.BACKEND_CORS_ORIGINS == ['http://localhost:3000']

    def test_defaults_to_no_origins(self) -> None:
        assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == []  # type: ignore[call-arg]
