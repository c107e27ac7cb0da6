"""Application state of the configuration program: navigation, options, briefs."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .locale import get_string

# Initial table selection, the largest machine word value.
SELECTION_UNSET = 2**64 - 1
DEFAULT_LOCALE = "zh-CN"


class ConfigError(ValueError):
    """The configuration document does not describe a valid configuration."""


class Flow(Enum):
    """Result of activating a table entry."""

    CONTINUE = "continue"
    BREAK = "break"


class RouteId(Enum):
    HOME = "Home"
    LANGUAGE = "Language"
    BOOTSTRAP = "Bootstrap"
    MACHINE_MODE = "MachineMode"
    SUPERVISOR_MODE = "SupervisorMode"
    PLATFORM_SUPPORT = "PlatformSupport"
    BOOTLOAD_MEDIA = "BootloadMedia"
    COMPILE_FLAGS = "CompileFlags"
    HELP_VER_ABOUT = "HelpVerAbout"
    SAMPLE_PROGRAM = "SampleProgram"
    STANDARD_SBI_FEAT = "StandardSbiFeat"
    FDT_IDENT = "FdtIdent"
    DYNAMIC_INFO_IDENT = "DynamicInfoIdent"
    ALLWINNER_D1_SERIES = "AllwinnerD1Series"
    SOPHGO_2002_SERIES = "Sophgo2002Series"


@dataclass
class Route:
    """A page on the navigation stack together with its selected row."""

    id: RouteId
    selected: int | None = None

    @classmethod
    def from_route_id(cls, route_id: RouteId) -> Route:
        return cls(id=route_id, selected=SELECTION_UNSET)


class Bootstrap(Enum):
    NO_BOOTSTRAP = "NoBootstrap"
    JUMP_TO_DRAM = "JumpToDram"
    HELLO_WORLD = "HelloWorld"
    SPI_FLASH = "SpiFlash"

    def is_machine_mode_supported(self) -> bool:
        return self in (Bootstrap.JUMP_TO_DRAM, Bootstrap.NO_BOOTSTRAP)


class Platform(Enum):
    NO_SPECIFIC_PLATFORM = "NoSpecificPlatform"
    ALLWINNER_D1_SERIES = "AllwinnerD1Series"
    SOPHGO_2002_SERIES = "Sophgo2002Series"

    def is_bootstrap_supported(self, bootstrap: Bootstrap) -> bool:
        if self is Platform.NO_SPECIFIC_PLATFORM:
            return bootstrap is Bootstrap.NO_BOOTSTRAP
        if self is Platform.ALLWINNER_D1_SERIES:
            return True
        return False


@dataclass
class StandardSbiEnabled:
    """Which standard SBI extensions are enabled; all of them by default."""

    timer: bool = True
    ipi: bool = True
    rfence: bool = True
    hsm: bool = True
    srst: bool = True
    pmu: bool = True

    def _flags(self) -> list[bool]:
        return [getattr(self, f.name) for f in dataclasses.fields(self)]

    def sbi_v1p0_ready(self) -> bool:
        return all(self._flags())

    def no_sbi_support(self) -> bool:
        return not any(self._flags())

    @classmethod
    def _from_mapping(cls, data: Any) -> StandardSbiEnabled:
        if not isinstance(data, Mapping):
            raise ConfigError("standard-sbi-enabled must be a table")
        values = {}
        for f in dataclasses.fields(cls):
            if f.name not in data:
                raise ConfigError(f"standard-sbi-enabled: missing field `{f.name}`")
            value = data[f.name]
            if not isinstance(value, bool):
                raise ConfigError(f"standard-sbi-enabled.{f.name} must be a boolean")
            values[f.name] = value
        return cls(**values)


def _parse_enum(enum_cls: type[Enum], data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise ConfigError(f"missing field `{key}`")
    try:
        return enum_cls(data[key])
    except ValueError:
        names = ", ".join(f"`{m.value}`" for m in enum_cls)
        raise ConfigError(
            f"unknown variant `{data[key]}` for `{key}`, expected one of {names}"
        ) from None


@dataclass
class Config:
    """Contents of the project configuration file."""

    bootstrap: Bootstrap
    platform: Platform
    locale: str | None = None
    standard_sbi_enabled: StandardSbiEnabled | None = None
    machine_fdt_ident_enabled: bool | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Config:
        """Build a configuration from a parsed document with kebab-case keys."""
        if not isinstance(data, Mapping):
            raise ConfigError("configuration must be a table")
        locale = data.get("locale")
        if locale is not None and not isinstance(locale, str):
            raise ConfigError("locale must be a string")
        sbi = data.get("standard-sbi-enabled")
        fdt = data.get("machine-fdt-ident-enabled")
        if fdt is not None and not isinstance(fdt, bool):
            raise ConfigError("machine-fdt-ident-enabled must be a boolean")
        return cls(
            bootstrap=_parse_enum(Bootstrap, data, "bootstrap"),
            platform=_parse_enum(Platform, data, "platform"),
            locale=str(locale) if locale is not None else None,
            standard_sbi_enabled=(
                StandardSbiEnabled._from_mapping(sbi) if sbi is not None else None
            ),
            machine_fdt_ident_enabled=fdt,
        )


def _system_locale() -> str | None:
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if not value or value in ("C", "POSIX"):
            continue
        tag = value.split(".", 1)[0].split("@", 1)[0]
        if tag:
            return tag.replace("_", "-")
    return None


ControlFlowFn = Callable[[int, "App"], Flow]


@dataclass
class App:
    """State shared by every page of the configuration interface."""

    current_navigation: Route = field(
        default_factory=lambda: Route.from_route_id(RouteId.HOME)
    )
    navigation_stack: list[Route] = field(default_factory=list)
    item_length: int = 0
    control_flow_fn: ControlFlowFn | None = None
    locale: str = DEFAULT_LOCALE
    bootstrap: Bootstrap = Bootstrap.JUMP_TO_DRAM
    standard_sbi_enabled: StandardSbiEnabled = field(default_factory=StandardSbiEnabled)
    machine_mode_fdt_ident_enabled: bool = True
    platform: Platform = Platform.NO_SPECIFIC_PLATFORM
    supervisor_mode_brief: str = ""
    bootload_media_brief: str = ""
    compile_flags_brief: str = ""
    help_ver_about_brief: str = ""

    @classmethod
    def from_config(cls, config: Config) -> App:
        locale = config.locale
        if locale is None:
            locale = _system_locale() or DEFAULT_LOCALE
        return cls(
            locale=locale,
            bootstrap=config.bootstrap,
            standard_sbi_enabled=(
                dataclasses.replace(config.standard_sbi_enabled)
                if config.standard_sbi_enabled is not None
                else StandardSbiEnabled()
            ),
            platform=config.platform,
            machine_mode_fdt_ident_enabled=(
                True
                if config.machine_fdt_ident_enabled is None
                else config.machine_fdt_ident_enabled
            ),
        )

    # navigation

    def current_route(self) -> Route:
        return self.current_navigation

    def push_route(self, route_id: RouteId) -> None:
        self.navigation_stack.append(self.current_navigation)
        self.current_navigation = Route.from_route_id(route_id)

    def pop_route(self) -> Route | None:
        """Return to the previous page; give back the page left, or None at the root."""
        if not self.navigation_stack:
            return None
        left = self.current_navigation
        self.current_navigation = self.navigation_stack.pop()
        return left

    def next(self) -> None:
        route = self.current_navigation
        selected = route.selected
        if selected is None or selected >= self.item_length - 1:
            route.selected = 0
        else:
            route.selected = selected + 1

    def previous(self) -> None:
        route = self.current_navigation
        selected = route.selected
        if selected is None:
            route.selected = 0
        elif selected == 0:
            route.selected = self.item_length - 1
        else:
            route.selected = selected - 1

    def enter(self) -> Flow:
        selected = self.current_navigation.selected
        if selected is None or self.control_flow_fn is None:
            return Flow.CONTINUE
        return self.control_flow_fn(selected, self)

    # briefs

    def _text(self, key: str) -> str:
        return get_string(key, self.locale)

    def language_brief(self) -> str:
        return self._text("language.display.current")

    def bootstrap_brief(self) -> str:
        if self.bootstrap is Bootstrap.JUMP_TO_DRAM:
            return self._text("bootstrap.jump-to-dram")
        if self.bootstrap is Bootstrap.NO_BOOTSTRAP:
            return self._text("bootstrap.no-bootstrap")
        return self.bootstrap_sample_program_brief()

    def _choice_brief(self, option: Bootstrap) -> str:
        if not self.platform.is_bootstrap_supported(option):
            return self._text("sample-program.platform-not-supported")
        if self.bootstrap is option:
            return self._text("sample-program.chosen")
        return self._text("sample-program.not-chosen")

    def bootstrap_jump_to_dram_brief(self) -> str:
        return self._choice_brief(Bootstrap.JUMP_TO_DRAM)

    def bootstrap_sample_program_brief(self) -> str:
        key = {
            Bootstrap.HELLO_WORLD: "sample-program.hello-world",
            Bootstrap.SPI_FLASH: "sample-program.spi-flash",
        }.get(self.bootstrap, "sample-program.not-sample-program")
        return self._text(key)

    def bootstrap_no_bootstrap_brief(self) -> str:
        return self._choice_brief(Bootstrap.NO_BOOTSTRAP)

    def standard_sbi_brief(self) -> str:
        if self.standard_sbi_enabled.sbi_v1p0_ready():
            key = "standard-sbi-features.v1p0-prepared"
        elif self.standard_sbi_enabled.no_sbi_support():
            key = "standard-sbi-features.no-support"
        else:
            key = "standard-sbi-features.partial"
        return self._text(key)

    def machine_mode_brief(self) -> str:
        if not self.bootstrap.is_machine_mode_supported():
            return self._text("machine-mode.not-supported")
        return self.standard_sbi_brief()

    def platform_support_brief(self) -> str:
        key = {
            Platform.ALLWINNER_D1_SERIES: "platform-support.allwinner-d1-series",
            Platform.SOPHGO_2002_SERIES: "platform-support.sophgo-2002-series",
            Platform.NO_SPECIFIC_PLATFORM: "platform-support.no-specific-platform",
        }[self.platform]
        return self._text(key)