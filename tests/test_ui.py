import pytest

from sbiproto.app import SELECTION_UNSET, App, Bootstrap, Flow, Platform, RouteId
from sbiproto.ui import (
    allwinner_d1_series_page,
    bootstrap_page,
    fdt_ident_page,
    home_page,
    language_page,
    machine_mode_page,
    page_for,
    platform_support_page,
    sample_program_page,
    sophgo_2002_series_page,
    standard_sbi_features_page,
)


def test_install_clamps_initial_selection_to_last_row():
    app = App()
    assert app.current_route().selected == SELECTION_UNSET
    page = home_page(app)
    page.install(app)
    assert app.item_length == len(page.items)
    assert app.current_route().selected == len(page.items) - 1
    assert app.enter() is Flow.BREAK


def test_home_navigation_pushes_routes():
    app = App()
    home_page(app).install(app)
    app.next()
    assert app.current_route().selected == 0
    assert app.enter() is Flow.CONTINUE
    assert app.current_route().id is RouteId.LANGUAGE
    assert app.pop_route().id is RouteId.LANGUAGE
    assert app.current_route().id is RouteId.HOME


def test_home_rows_translate_item_column_only():
    app = App(locale="en-US")
    rows = home_page(app).rows("en-US")
    assert rows[0][0] == "Language"
    assert rows[0][1] == "Language settings"
    assert rows[0][2] == "English (US)"
    assert rows[-1][1] == "Quit and save"
    assert all(len(row) == 4 for row in rows)


def test_header_and_title_translation():
    page = home_page(App())
    assert page.header_cells("en-US") == ["Identifier", "Item", "Brief", ""]
    assert page.title_text("en-US") == " RustSBI Prototyping System - Home page "
    assert page.title_text("zh-CN") == " RustSBI 原型设计系统 - 主界面 "


def test_language_selection_sets_locale_and_returns():
    app = App()
    page = language_page(app)
    assert page.control_flow_fn(1, app) is Flow.BREAK
    assert app.locale == "en-US"
    assert page.control_flow_fn(0, app) is Flow.BREAK
    assert app.locale == "zh-CN"
    assert page.control_flow_fn(2, app) is Flow.BREAK
    assert app.locale == "zh-CN"


def test_language_rows_show_names_in_own_language():
    app = App(locale="en-US")
    rows = language_page(app).rows("en-US")
    assert rows[0][2] == "简体中文（中国）"
    assert rows[1][2] == "English (US)"
    assert rows[0][1] == "Simplified Chinese (China)"


def test_bootstrap_handler():
    app = App(platform=Platform.ALLWINNER_D1_SERIES, bootstrap=Bootstrap.HELLO_WORLD)
    page = bootstrap_page(app)
    assert page.control_flow_fn(0, app) is Flow.CONTINUE
    assert app.bootstrap is Bootstrap.JUMP_TO_DRAM
    assert page.control_flow_fn(2, app) is Flow.CONTINUE
    assert app.bootstrap is Bootstrap.NO_BOOTSTRAP
    assert page.control_flow_fn(1, app) is Flow.CONTINUE
    assert app.current_route().id is RouteId.SAMPLE_PROGRAM
    assert page.control_flow_fn(3, app) is Flow.BREAK


def test_bootstrap_rows_use_briefs():
    app = App(locale="en-US", platform=Platform.ALLWINNER_D1_SERIES,
              bootstrap=Bootstrap.JUMP_TO_DRAM)
    rows = bootstrap_page(app).rows("en-US")
    assert rows[0][2] == "Chosen"
    assert rows[2][2] == "Not chosen"
    assert rows[1][2] == "Not using sample programs"


def test_sample_program_page():
    app = App(bootstrap=Bootstrap.SPI_FLASH)
    page = sample_program_page(app)
    rows = page.rows("en-US")
    assert rows[0][2] == "Not chosen"
    assert rows[1][2] == "Chosen"
    assert page.control_flow_fn(0, app) is Flow.CONTINUE
    assert app.bootstrap is Bootstrap.HELLO_WORLD
    assert page.control_flow_fn(2, app) is Flow.BREAK


def test_machine_mode_handler_pushes_feature_routes():
    app = App()
    page = machine_mode_page(app)
    expected = [RouteId.STANDARD_SBI_FEAT, RouteId.FDT_IDENT, RouteId.DYNAMIC_INFO_IDENT]
    for idx, route_id in enumerate(expected):
        assert page.control_flow_fn(idx, app) is Flow.CONTINUE
        assert app.current_route().id is route_id
    assert page.control_flow_fn(3, app) is Flow.BREAK


def test_platform_support_handler():
    app = App(platform=Platform.ALLWINNER_D1_SERIES)
    page = platform_support_page(app)
    assert page.control_flow_fn(0, app) is Flow.CONTINUE
    assert app.platform is Platform.NO_SPECIFIC_PLATFORM
    page.control_flow_fn(1, app)
    assert app.current_route().id is RouteId.ALLWINNER_D1_SERIES
    page.control_flow_fn(2, app)
    assert app.current_route().id is RouteId.SOPHGO_2002_SERIES


@pytest.mark.parametrize(
    "build, platform",
    [
        (allwinner_d1_series_page, Platform.ALLWINNER_D1_SERIES),
        (sophgo_2002_series_page, Platform.SOPHGO_2002_SERIES),
    ],
)
def test_single_platform_pages(build, platform):
    app = App()
    assert build(app).rows("en-US")[0][2] == "Platform not chosen"
    page = build(app)
    assert page.control_flow_fn(0, app) is Flow.CONTINUE
    assert app.platform is platform
    assert build(app).rows("en-US")[0][2] == "Platform chosen"
    assert page.control_flow_fn(1, app) is Flow.BREAK


def test_standard_sbi_features_toggle():
    app = App()
    page = standard_sbi_features_page(app)
    assert page.control_flow_fn(3, app) is Flow.CONTINUE
    assert app.standard_sbi_enabled.hsm is False
    rows = standard_sbi_features_page(app).rows("en-US")
    assert rows[3][1] == "Hart state monitor extension"
    assert rows[3][2] == "Disabled"
    assert rows[0][2] == "Enabled"
    page.control_flow_fn(3, app)
    assert app.standard_sbi_enabled.sbi_v1p0_ready()
    assert page.control_flow_fn(6, app) is Flow.BREAK


def test_fdt_ident_toggle():
    app = App()
    page = fdt_ident_page(app)
    assert page.control_flow_fn(0, app) is Flow.CONTINUE
    assert app.machine_mode_fdt_ident_enabled is False
    page.control_flow_fn(0, app)
    assert app.machine_mode_fdt_ident_enabled is True
    assert page.control_flow_fn(1, app) is Flow.BREAK


def test_out_of_range_entry_raises():
    app = App()
    with pytest.raises(ValueError):
        home_page(app).control_flow_fn(9, app)
    with pytest.raises(ValueError):
        fdt_ident_page(app).control_flow_fn(2, app)


def test_page_for_dispatches_on_current_route():
    app = App()
    assert page_for(app).title == "home.title"
    app.push_route(RouteId.STANDARD_SBI_FEAT)
    assert page_for(app).title == "standard-sbi-features.title"


def test_page_for_unknown_route_raises():
    app = App()
    app.push_route(RouteId.SUPERVISOR_MODE)
    with pytest.raises(LookupError):
        page_for(app)


def test_next_wraps_within_installed_page():
    app = App()
    app.push_route(RouteId.FDT_IDENT)
    page = page_for(app)
    page.install(app)
    assert app.current_route().selected == 1
    app.next()
    assert app.current_route().selected == 0
    app.previous()
    assert app.current_route().selected == 1