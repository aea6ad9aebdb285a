import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

CUSTO_FIXO_PADRAO = 50
ERRO_SEGUNDOS_PADRAO = 4.0
LOG_LEVEL_PADRAO = "WARNING"


@dataclass(frozen=True)
class Settings:
    custo_fixo: float = CUSTO_FIXO_PADRAO
    erro_segundos: float = ERRO_SEGUNDOS_PADRAO
    log_level: str = LOG_LEVEL_PADRAO


def _env_float(name, default):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Valor inválido em %s=%r, usando %s", name, raw, default)
        return default


def load_settings():
    level = (os.environ.get("PRECIFICACAO_LOG_LEVEL") or LOG_LEVEL_PADRAO).upper()
    if level not in logging.getLevelNamesMapping():
        level = LOG_LEVEL_PADRAO
    erro = _env_float("PRECIFICACAO_ERRO_SEGUNDOS", ERRO_SEGUNDOS_PADRAO)
    if erro < 0:
        erro = ERRO_SEGUNDOS_PADRAO
    return Settings(
        custo_fixo=_env_float("PRECIFICACAO_CUSTO_FIXO", CUSTO_FIXO_PADRAO),
        erro_segundos=erro,
        log_level=level,
    )


def configure_logging(settings):
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
