from typing import Any, Dict, List

from .logging_config import get_logger

logger = get_logger("ComponentRegistry")


class Component:
    """
    Uygulamadaki her bağımsız parçanın ortak sözleşmesi.

    start() / stop() registry tarafından sırayla çağrılır; alt sınıflar
    yalnızca ihtiyaç duydukları kısmı override eder.
    """

    def __init__(self, name: str):
        self.name = name
        self.initialized = False

    async def start(self) -> None:
        raise NotImplementedError(f"{self.name}.start() must be implemented")

    async def stop(self) -> None:
        return None


class ComponentRegistry:
    def __init__(self):
        self.components: List[Component] = []
        self.started = False

    def register(self, component: Any) -> None:
        if not isinstance(component, Component):
            logger.warning("register_ignored", reason="not a Component", value=repr(component))
            return
        self.components.append(component)

    async def start_all(self) -> None:
        for component in self.components:
            try:
                await component.start()
                component.initialized = True
                logger.info("component_started", name=component.name)
            except Exception:
                component.initialized = False
                logger.exception("component_start_failed", name=component.name)
        self.started = True

    async def stop_all(self) -> None:
        for component in reversed(self.components):
            try:
                await component.stop()
                logger.info("component_stopped", name=component.name)
            except Exception:
                logger.exception("component_stop_failed", name=component.name)
            finally:
                component.initialized = False
        self.started = False

    def status(self) -> Dict[str, bool]:
        return {c.name: c.initialized for c in self.components}
