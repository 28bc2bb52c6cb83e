import importlib
import logging
import pkgutil

from core.plugin import RobotPlugin

logger = logging.getLogger(__name__)


def discover_plugins() -> dict[str, type[RobotPlugin]]:
    """Scan src/robots/ for packages that export a RobotPlugin subclass."""
    plugins = {}
    package = importlib.import_module("robots")
    for _importer, modname, ispkg in pkgutil.iter_modules(package.__path__):
        if not ispkg or modname.startswith("_"):
            continue
        mod = importlib.import_module(f"robots.{modname}")
        for obj in vars(mod).values():
            if (
                isinstance(obj, type)
                and issubclass(obj, RobotPlugin)
                and obj is not RobotPlugin
            ):
                logger.debug("Found plugin %s in robots.%s", obj.__name__, modname)
                plugins[modname] = obj
    return plugins


def load_plugins(names: list[str] | None = None) -> dict[str, RobotPlugin]:
    """Instantiate the discovered plugins, optionally only those in ``names``.

    Raises KeyError listing any requested name that has no plugin.
    """
    available = discover_plugins()
    if names:
        unknown = set(names) - set(available)
        if unknown:
            raise KeyError(
                f"Unknown robot(s): {sorted(unknown)}. Available: {sorted(available)}"
            )
        available = {k: v for k, v in available.items() if k in names}
    return {name: cls() for name, cls in available.items()}
