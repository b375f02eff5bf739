from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import load_dotenv


class ConfigError(Exception):
    """Configuração obrigatória ausente."""


@dataclass(frozen=True)
class Settings:
    supabase_url: str
    supabase_key: str
    table: str = "events"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """Lê as variáveis de ambiente (SUPABASE_URL, SUPABASE_KEY, ...)."""
        if env is None:
            env = os.environ

        missing = [name for name in ("SUPABASE_URL", "SUPABASE_KEY") if not env.get(name, "").strip()]
        if missing:
            raise ConfigError(f"Variáveis de ambiente ausentes: {', '.join(missing)}")

        return cls(
            supabase_url=env["SUPABASE_URL"].strip(),
            supabase_key=env["SUPABASE_KEY"].strip(),
            table=env.get("CALENDARIO_TABLE", "").strip() or "events",
            log_level=(env.get("CALENDARIO_LOG_LEVEL", "").strip() or "INFO").upper(),
        )


def load_settings() -> Settings:
    """Carrega o .env (se existir) e monta as configurações."""
    load_dotenv()
    return Settings.from_env()
