"""Translated user-interface strings, looked up by key and locale."""

from __future__ import annotations

from collections.abc import Iterable

_ZH = "zh-CN"
_EN = "en-US"


def _entry(zh: str, en: str) -> dict[str, str]:
    return {_ZH: zh, _EN: en}


_TABLE: dict[str, dict[str, str]] = {
    "id": _entry("编号", "Identifier"),
    "back": _entry("返回", "Back"),
    "home.title": _entry(" RustSBI 原型设计系统 - 主界面 ", " RustSBI Prototyping System - Home page "),
    "home.language": _entry("配置语言", "Language settings"),
    "home.bootstrap": _entry("启动程序", "Bootstrap program"),
    "home.item": _entry("选项", "Item"),
    "home.brief": _entry("简述", "Brief"),
    "home.machine-mode": _entry("机器态功能", "Machine mode"),
    "home.supervisor-mode": _entry("内核态功能", "Supevisor mode"),
    "home.platform-support": _entry("平台支持", "Platform support"),
    "home.bootload-media": _entry("引导介质", "Bootloading media"),
    "home.compile-flags": _entry("编译配置", "Compile flags"),
    "home.help-ver-about": _entry("帮助关于", "Help, version & about"),
    "home.quit-and-save": _entry("退出并保存", "Quit and save"),
    "language.display.current": _entry("简体中文（中国）", "English (US)"),
    "language.display.zh-CN": _entry("简体中文（中国）", "Simplified Chinese (China)"),
    "language.display.en-US": _entry("英文（美国）", "English (US)"),
    "language.title": _entry(" RustSBI 原型设计系统 - 语言选项 ", " RustSBI Prototyping System - Language settings "),
    "language.language": _entry("语言", "Language"),
    "bootstrap.title": _entry(" RustSBI 原型设计系统 - 启动程序 ", " RustSBI Prototyping System - Bootstrap program "),
    "bootstrap.no-bootstrap": _entry("不使用启动程序", "Bootstrap program not used"),
    "bootstrap.jump-to-dram": _entry("跳转至 DRAM", "Jump to DRAM"),
    "bootstrap.sample-program": _entry("仅启动示例程序", "Start sample program only"),
    "sample-program.title": _entry(" RustSBI 原型设计系统 - 示例程序 ", " RustSBI Prototyping System - Sample program "),
    "sample-program.chosen": _entry("已选中", "Chosen"),
    "sample-program.not-chosen": _entry("未选中", "Not chosen"),
    "sample-program.platform-not-supported": _entry("目标平台不支持此程序", "Target does not support this program"),
    "sample-program.hello-world": _entry("Hello World 示例程序", "Hello World sample program"),
    "sample-program.spi-flash": _entry("SPI 闪存示例程序", "SPI flash sample program"),
    "sample-program.not-sample-program": _entry("不使用示例程序", "Not using sample programs"),
    "machine-mode.title": _entry(" RustSBI 原型设计系统 - 机器态功能 ", " RustSBI Prototyping System - Machine mode features "),
    "machine-mode.standard-sbi-feat": _entry("标准 SBI 功能", "Standard SBI features"),
    "machine-mode.fdt-ident": _entry("设备树识别", "Device Tree identification"),
    "machine-mode.dynamic-info-ident": _entry("动态信息识别", "Dynamic Information identification"),
    "machine-mode.not-supported": _entry("启动程序不支持机器态功能", "Bootstrap program does not support machine mode features"),
    "platform-support.title": _entry(" RustSBI 原型设计系统 - 平台支持 ", " RustSBI Prototyping System - Platform support "),
    "platform-support.allwinner-d1-series": _entry("全志® D1-H 系列平台", "Allwinner® D1-H series"),
    "platform-support.sophgo-2002-series": _entry("算能® SG2002 系列平台", "Sophgo® SG2002 series"),
    "platform-support.choose-platform": _entry("选择此平台", "Choose this platform"),
    "platform-support.chosen": _entry("已选中此平台", "Platform chosen"),
    "platform-support.not-chosen": _entry("未选中此平台", "Platform not chosen"),
    "platform-support.no-specific-platform": _entry("未指定平台", "No platform speficied"),
    "allwinner-d1-series.title": _entry(" RustSBI 原型设计系统 - 全志® D1-H 系列平台 ", " RustSBI Prototyping System - Allwinner® D1-H series "),
    "sophgo-2002-series.title": _entry(" RustSBI 原型设计系统 - 算能® SG2002 系列平台 ", " RustSBI Prototyping System - Sophgo® SG2002 series "),
    "standard-sbi-features.title": _entry(" RustSBI 原型设计系统 - 标准 SBI 功能 ", " RustSBI Prototyping System - Standard SBI features "),
    "standard-sbi-features.timer": _entry("时钟扩展", "Timer extension"),
    "standard-sbi-features.ipi": _entry("核间中断扩展", "Inter-processor interrupt extension"),
    "standard-sbi-features.rfence": _entry("远程栅栏扩展", "Remote fence extension"),
    "standard-sbi-features.hsm": _entry("核状态扩展", "Hart state monitor extension"),
    "standard-sbi-features.srst": _entry("系统复位扩展", "System reset extension"),
    "standard-sbi-features.pmu": _entry("性能监视扩展", "Performance monitor extension"),
    "standard-sbi-features.v1p0-prepared": _entry("标准 SBI 1.0 实现", "Standard SBI 1.0 implementation"),
    "standard-sbi-features.partial": _entry("仅启用部分 SBI 扩展", "Parital SBI extension(s) enabled"),
    "standard-sbi-features.no-support": _entry("不支持 SBI 功能", "No SBI features supported"),
    "standard-sbi-features.enabled": _entry("已启用", "Enabled"),
    "standard-sbi-features.disabled": _entry("已禁用", "Disabled"),
}


def get_string(key: str, locale: str) -> str:
    """Return the text for ``key`` in ``locale``, or an empty string if unknown."""
    return _TABLE.get(key, {}).get(locale, "")


def translate(keys: str | Iterable[str], locale: str) -> str | list[str]:
    """Translate a single key, or each key of an iterable, into ``locale``."""
    if isinstance(keys, str):
        return get_string(keys, locale)
    return [get_string(key, locale) for key in keys]