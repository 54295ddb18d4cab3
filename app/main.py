import logging
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    # 1. Carregar .env e Configurar Logs
    load_dotenv()

    from app.core.config import settings

    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    logger.info(f"{settings.APP_NAME} logging configured ({settings.ENVIRONMENT})")


def init_db(bind=None) -> None:
    """Creates every table known to the models (no migrations)."""
    from app.db.base import Base
    from app.db.session import engine

    try:
        logger.info("Criando tabelas no banco de dados...")
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Banco de dados pronto!")
    except Exception as e:
        logger.error(f"ERRO CRITICO NO BANCO: {e}")
        raise
