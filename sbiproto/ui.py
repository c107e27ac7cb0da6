"""Table pages of the configuration interface: rows, headings and entry handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .app import App, Bootstrap, Flow, Platform, RouteId
from .locale import get_string, translate

Handler = Callable[[int, App], Flow]


def _length(size: int) -> tuple[str, int]:
    return ("length", size)


def _min(size: int) -> tuple[str, int]:
    return ("min", size)


def _bad_entry(idx: int) -> ValueError:
    return ValueError(f"page has no entry {idx}")


@dataclass
class Page:
    """One table page: title key, header keys, rows and what activating a row does.

    ``item_translate_idx`` names the columns whose cells are locale keys.
    ``widths`` holds column constraints as ``("length" | "min", size)`` pairs.
    """

    title: str
    header: list[str]
    items: list[list[str]]
    item_translate_idx: list[int]
    control_flow_fn: Handler
    widths: list[tuple[str, int]] = field(default_factory=list)

    def header_cells(self, locale: str) -> list[str]:
        """The translated column headings."""
        return list(translate(self.header, locale))

    def rows(self, locale: str) -> list[list[str]]:
        """The rows with the key columns translated into ``locale``."""
        rows = [list(row) for row in self.items]
        for column in self.item_translate_idx:
            for row in rows:
                row[column] = get_string(row[column], locale)
        return rows

    def title_text(self, locale: str) -> str:
        return get_string(self.title, locale)

    def install(self, app: App) -> None:
        """Make this page the one the app's navigation keys act upon.

        A selection past the last row is moved onto the last row, as drawing
        the table does.
        """
        route = app.current_route()
        if self.items and route.selected is not None and route.selected >= len(self.items):
            route.selected = len(self.items) - 1
        app.item_length = len(self.items)
        app.control_flow_fn = self.control_flow_fn


_FOUR_COLUMNS = ["id", "home.item", "home.brief", ""]


# home

_HOME_TARGETS = [
    RouteId.LANGUAGE,
    RouteId.BOOTSTRAP,
    RouteId.MACHINE_MODE,
    RouteId.SUPERVISOR_MODE,
    RouteId.PLATFORM_SUPPORT,
    RouteId.BOOTLOAD_MEDIA,
    RouteId.COMPILE_FLAGS,
    RouteId.HELP_VER_ABOUT,
]


def _home_handle(idx: int, app: App) -> Flow:
    if 0 <= idx < len(_HOME_TARGETS):
        app.push_route(_HOME_TARGETS[idx])
        return Flow.CONTINUE
    if idx == len(_HOME_TARGETS):
        return Flow.BREAK
    raise _bad_entry(idx)


def home_page(app: App) -> Page:
    items = [
        ["Language", "home.language", app.language_brief(), ">"],
        ["Bootstrap", "home.bootstrap", app.bootstrap_brief(), ">"],
        ["MachineMode", "home.machine-mode", app.machine_mode_brief(), ">"],
        ["SupervisorMode", "home.supervisor-mode", app.supervisor_mode_brief, ">"],
        ["PlatformSupport", "home.platform-support", app.platform_support_brief(), ">"],
        ["BootloadMedia", "home.bootload-media", app.bootload_media_brief, ">"],
        ["CompileFlags", "home.compile-flags", app.compile_flags_brief, ">"],
        ["HelpVerAbout", "home.help-ver-about", app.help_ver_about_brief, ">"],
        ["QuitAndSave", "home.quit-and-save", "", ""],
    ]
    return Page(
        title="home.title",
        header=list(_FOUR_COLUMNS),
        items=items,
        item_translate_idx=[1],
        widths=[_length(18), _length(20), _length(30), _min(2)],
        control_flow_fn=_home_handle,
    )


# language

_LANGUAGES = ["zh-CN", "en-US"]


def _language_handle(idx: int, app: App) -> Flow:
    if 0 <= idx < len(_LANGUAGES):
        app.locale = _LANGUAGES[idx]
        return Flow.BREAK
    if idx == len(_LANGUAGES):
        return Flow.BREAK
    raise _bad_entry(idx)


def language_page(app: App) -> Page:
    items = [
        ["zh-CN", "language.display.zh-CN", get_string("language.display.zh-CN", "zh-CN")],
        ["en-US", "language.display.en-US", get_string("language.display.en-US", "en-US")],
        ["Back", get_string("back", app.locale)],
    ]
    return Page(
        title="language.title",
        header=["id", "language.language"],
        items=items,
        item_translate_idx=[1],
        widths=[_length(18), _length(30), _length(30)],
        control_flow_fn=_language_handle,
    )


# bootstrap

def _bootstrap_handle(idx: int, app: App) -> Flow:
    if idx == 0:
        app.bootstrap = Bootstrap.JUMP_TO_DRAM
    elif idx == 1:
        app.push_route(RouteId.SAMPLE_PROGRAM)
    elif idx == 2:
        app.bootstrap = Bootstrap.NO_BOOTSTRAP
    elif idx == 3:
        return Flow.BREAK
    else:
        raise _bad_entry(idx)
    return Flow.CONTINUE


def bootstrap_page(app: App) -> Page:
    items = [
        ["JumpToDram", "bootstrap.jump-to-dram", app.bootstrap_jump_to_dram_brief(), ""],
        ["SampleProgram", "bootstrap.sample-program", app.bootstrap_sample_program_brief(), ">"],
        ["NoBootstrap", "bootstrap.no-bootstrap", app.bootstrap_no_bootstrap_brief(), ""],
        ["Back", "back", "", ""],
    ]
    return Page(
        title="bootstrap.title",
        header=list(_FOUR_COLUMNS),
        items=items,
        item_translate_idx=[1],
        widths=[_length(18), _length(20), _length(30), _min(2)],
        control_flow_fn=_bootstrap_handle,
    )


# sample program

_SAMPLE_PROGRAMS = [Bootstrap.HELLO_WORLD, Bootstrap.SPI_FLASH]

_SAMPLE_CHOSEN = {True: "sample-program.chosen", False: "sample-program.not-chosen"}


def _sample_program_handle(idx: int, app: App) -> Flow:
    if 0 <= idx < len(_SAMPLE_PROGRAMS):
        app.bootstrap = _SAMPLE_PROGRAMS[idx]
        return Flow.CONTINUE
    if idx == len(_SAMPLE_PROGRAMS):
        return Flow.BREAK
    raise _bad_entry(idx)


def sample_program_page(app: App) -> Page:
    items = [
        ["HelloWorld", "sample-program.hello-world",
         _SAMPLE_CHOSEN[app.bootstrap is Bootstrap.HELLO_WORLD]],
        ["SpiFlash", "sample-program.spi-flash",
         _SAMPLE_CHOSEN[app.bootstrap is Bootstrap.SPI_FLASH]],
        ["Back", "back", ""],
    ]
    return Page(
        title="sample-program.title",
        header=list(_FOUR_COLUMNS),
        items=items,
        item_translate_idx=[1, 2],
        widths=[_length(18), _length(30), _length(20)],
        control_flow_fn=_sample_program_handle,
    )


# machine mode

_MACHINE_MODE_TARGETS = [
    RouteId.STANDARD_SBI_FEAT,
    RouteId.FDT_IDENT,
    RouteId.DYNAMIC_INFO_IDENT,
]


def _machine_mode_handle(idx: int, app: App) -> Flow:
    if 0 <= idx < len(_MACHINE_MODE_TARGETS):
        app.push_route(_MACHINE_MODE_TARGETS[idx])
        return Flow.CONTINUE
    if idx == len(_MACHINE_MODE_TARGETS):
        return Flow.BREAK
    raise _bad_entry(idx)


def machine_mode_page(app: App) -> Page:
    items = [
        ["StandardSbiFeat", "machine-mode.standard-sbi-feat", app.standard_sbi_brief(), ">"],
        ["FdtIdent", "machine-mode.fdt-ident", "TODO", ">"],
        ["DynamicInfoIdent", "machine-mode.dynamic-info-ident", "TODO", ">"],
        ["Back", "back", "", ""],
    ]
    return Page(
        title="machine-mode.title",
        header=list(_FOUR_COLUMNS),
        items=items,
        item_translate_idx=[1],
        widths=[_length(18), _length(20), _length(30), _min(2)],
        control_flow_fn=_machine_mode_handle,
    )


# platform support

def _platform_support_handle(idx: int, app: App) -> Flow:
    if idx == 0:
        app.platform = Platform.NO_SPECIFIC_PLATFORM
    elif idx == 1:
        app.push_route(RouteId.ALLWINNER_D1_SERIES)
    elif idx == 2:
        app.push_route(RouteId.SOPHGO_2002_SERIES)
    elif idx == 3:
        return Flow.BREAK
    else:
        raise _bad_entry(idx)
    return Flow.CONTINUE


def platform_support_page(app: App) -> Page:
    items = [
        ["NoSpecificPlatform", "platform-support.no-specific-platform", "", ">"],
        ["AllwinnerD1Series", "platform-support.allwinner-d1-series", "", ">"],
        ["Sophgo2002Series", "platform-support.sophgo-2002-series", "", ">"],
        ["Back", "back", "", ""],
    ]
    return Page(
        title="platform-support.title",
        header=list(_FOUR_COLUMNS),
        items=items,
        item_translate_idx=[1],
        widths=[_length(18), _length(25), _length(30), _min(2)],
        control_flow_fn=_platform_support_handle,
    )


# single platform pages

_PLATFORM_CHOSEN = {True: "platform-support.chosen", False: "platform-support.not-chosen"}


def _choose_platform_handler(platform: Platform) -> Handler:
    def handle(idx: int, app: App) -> Flow:
        if idx == 0:
            app.platform = platform
            return Flow.CONTINUE
        if idx == 1:
            return Flow.BREAK
        raise _bad_entry(idx)

    return handle


def _platform_page(app: App, platform: Platform, title: str) -> Page:
    items = [
        ["ChoosePlatform", "platform-support.choose-platform",
         _PLATFORM_CHOSEN[app.platform is platform], ""],
        ["Back", "back", "", ""],
    ]
    return Page(
        title=title,
        header=list(_FOUR_COLUMNS),
        items=items,
        item_translate_idx=[1, 2],
        widths=[_length(18), _length(20), _length(30), _min(2)],
        control_flow_fn=_choose_platform_handler(platform),
    )


def allwinner_d1_series_page(app: App) -> Page:
    return _platform_page(app, Platform.ALLWINNER_D1_SERIES, "allwinner-d1-series.title")


def sophgo_2002_series_page(app: App) -> Page:
    return _platform_page(app, Platform.SOPHGO_2002_SERIES, "sophgo-2002-series.title")


# standard SBI features

_SBI_FEATURES = [
    ("TimerExtension", "timer"),
    ("IpiExtension", "ipi"),
    ("RfenceExtension", "rfence"),
    ("HsmExtension", "hsm"),
    ("SrstExtension", "srst"),
    ("PmuExtension", "pmu"),
]

_ENABLED_STR = {
    True: "standard-sbi-features.enabled",
    False: "standard-sbi-features.disabled",
}


def _standard_sbi_handle(idx: int, app: App) -> Flow:
    if 0 <= idx < len(_SBI_FEATURES):
        name = _SBI_FEATURES[idx][1]
        flags = app.standard_sbi_enabled
        setattr(flags, name, not getattr(flags, name))
        return Flow.CONTINUE
    if idx == len(_SBI_FEATURES):
        return Flow.BREAK
    raise _bad_entry(idx)


def standard_sbi_features_page(app: App) -> Page:
    flags = app.standard_sbi_enabled
    items = [
        [ident, f"standard-sbi-features.{name}", _ENABLED_STR[bool(getattr(flags, name))]]
        for ident, name in _SBI_FEATURES
    ]
    items.append(["Back", "back", ""])
    return Page(
        title="standard-sbi-features.title",
        header=["id", "home.item", "home.brief"],
        items=items,
        item_translate_idx=[1, 2],
        widths=[_length(18), _min(30), _length(12)],
        control_flow_fn=_standard_sbi_handle,
    )


# device tree identification

def _fdt_ident_handle(idx: int, app: App) -> Flow:
    if idx == 0:
        app.machine_mode_fdt_ident_enabled = not app.machine_mode_fdt_ident_enabled
        return Flow.CONTINUE
    if idx == 1:
        return Flow.BREAK
    raise _bad_entry(idx)


def fdt_ident_page(app: App) -> Page:
    items = [
        ["FdtIdentEnabled", "fdt-ident.fdt-ident-enabled", ""],
        ["Back", "back", ""],
    ]
    return Page(
        title="fdt-ident.title",
        header=["id", "home.item", "home.brief"],
        items=items,
        item_translate_idx=[1, 2],
        widths=[_length(18), _min(30), _length(12)],
        control_flow_fn=_fdt_ident_handle,
    )


_PAGES: dict[RouteId, Callable[[App], Page]] = {
    RouteId.HOME: home_page,
    RouteId.LANGUAGE: language_page,
    RouteId.BOOTSTRAP: bootstrap_page,
    RouteId.SAMPLE_PROGRAM: sample_program_page,
    RouteId.MACHINE_MODE: machine_mode_page,
    RouteId.PLATFORM_SUPPORT: platform_support_page,
    RouteId.ALLWINNER_D1_SERIES: allwinner_d1_series_page,
    RouteId.SOPHGO_2002_SERIES: sophgo_2002_series_page,
    RouteId.STANDARD_SBI_FEAT: standard_sbi_features_page,
    RouteId.FDT_IDENT: fdt_ident_page,
}


def page_for(app: App) -> Page:
    """Build the page for the app's current route.

    Raises LookupError for routes that have no page.
    """
    route_id = app.current_route().id
    try:
        build = _PAGES[route_id]
    except KeyError:
        raise LookupError(f"no page for route {route_id.value}") from None
    return build(app)