import asyncio
import structlog
from pathlib import Path

logger = structlog.get_logger()


class FileConfigLoader:
    """
    Reads the shared configuration file whose text is the submission destination.
    """
    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    async def load(self, path: str) -> str:
        text = await asyncio.to_thread(Path(path).read_text, encoding=self._encoding)
        destination = text.strip()
        logger.info("config_loaded", config_path=path, destination=destination)
        return destination
