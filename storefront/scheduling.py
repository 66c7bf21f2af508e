import asyncio
import inspect
from typing import Any, Callable, Optional

from .logging_config import get_logger

logger = get_logger("PeriodicTask")


class PeriodicTask:
    """
    Sahibi olan component tarafından kurulan, iptal edilebilir tekrarlı görev.

    start() her çağrıldığında zamanlayıcıyı sıfırdan kurar (clear + re-arm).
    Bir tick'te oluşan hata loglanır, görev çalışmaya devam eder.
    """

    def __init__(self, name: str, interval: float, callback: Callable[[], Any]):
        self.name = name
        self.interval = interval
        self.callback = callback
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        self.stop()
        self._task = asyncio.get_running_loop().create_task(self._run(), name=self.name)

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                result = self.callback()
                if inspect.isawaitable(result):
                    await result
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("tick_failed", task=self.name)
