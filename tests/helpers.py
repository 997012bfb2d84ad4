import importlib.util
from pathlib import Path
from types import ModuleType


def load_script_module(script: Path, module_name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(module_name, script)
    if spec is None or spec.loader is None:
        raise RuntimeError(f"Failed to load script module from {script}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class UInt8:
    """Minimal 8-bit unsigned integer that wraps on construction."""

    def __init__(self, value: int = 0) -> None:
        self.value = value % 256

    def __mod__(self, other: "UInt8") -> "UInt8":
        return UInt8(self.value % other.value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UInt8) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return str(self.value)
