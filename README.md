# sbiproto

`sbiproto` is a bilingual (Simplified Chinese / English) terminal menu for
configuring a RISC-V SBI firmware prototype. It lets you choose the bootstrap
program, the target platform and the standard SBI extensions to enable, and
stores the choices in an `Xtask.toml` file. It also provides helpers that
build and run commands for the `xfel` tool used with Allwinner chips in FEL
mode.

## Installation

```
pip install .
```

The menu uses Python's `curses` module, so it needs a terminal that `curses`
supports.

## Usage

Run the command from the project directory; `Xtask.toml` is read from and
written to the current working directory.

```
sbiproto config
```

If `Xtask.toml` exists, the menu starts from its settings; otherwise it starts
from the defaults. Use the Up and Down arrow keys to move between rows, and
Enter or Space to activate a row. Choosing "Quit and save" on the home page
leaves the menu and writes `Xtask.toml`.

The options `-v`/`--verbose` and `-q`/`--quiet` may be repeated to raise or
lower how much is logged; by default only errors are shown.

The menu covers:

- **Language** – `zh-CN` or `en-US`. If the configuration file names no
  locale, the one from `LC_ALL`, `LC_MESSAGES` or `LANG` is used, falling back
  to `zh-CN`.
- **Bootstrap program** – jump to DRAM, a sample program (Hello World or SPI
  flash), or no bootstrap program.
- **Machine mode** – toggle the timer, IPI, remote fence, hart state monitor,
  system reset and performance monitor extensions, and device tree
  identification.
- **Platform support** – no specific platform, Allwinner D1-H series or
  Sophgo SG2002 series.

The supervisor mode, bootloading media, compile flags and help pages listed on
the home page have no page of their own; selecting one of them stops the menu
with a `LookupError`.

## Configuration file

`Xtask.toml` uses kebab-case keys, for example:

```toml
locale = "en-US"
bootstrap = "JumpToDram"
machine-fdt-ident-enabled = true
platform = "AllwinnerD1Series"

[standard-sbi-enabled]
timer = true
ipi = true
rfence = true
hsm = true
srst = true
pmu = true
```

`bootstrap` is one of `NoBootstrap`, `JumpToDram`, `HelloWorld` or `SpiFlash`;
`platform` is one of `NoSpecificPlatform`, `AllwinnerD1Series` or
`Sophgo2002Series`. Both are required. Saving from the menu keeps any other
content and formatting already in the file.

## Library use

- `sbiproto.locale.get_string(key, locale)` looks up a translated string, and
  `sbiproto.locale.translate(keys, locale)` translates one key or a list of them.
- `sbiproto.config.load_config(text)` parses configuration text into a
  `sbiproto.app.Config` (raising `sbiproto.app.ConfigError` if it is invalid),
  and `sbiproto.app.App.from_config(config)` builds the menu state from it.
- `sbiproto.config.save_app_to_string(app, text)` returns the updated TOML text;
  `read_config_file`, `write_config_file` and `config_file_exists` take the
  project directory.
- `sbiproto.ui.page_for(app)` returns the `Page` for the app's current route,
  with its translated title, header and rows.
- `sbiproto.xfel.Xfel` builds `xfel` invocations: `Xfel.write(address, file)`,
  `Xfel.exec(address)`, `Xfel.ddr(ty)`, `Xfel.reset()`,
  `Xfel.spinand_read(address, length, file)` and
  `Xfel.spinand_write(address, file)`. `.argv` gives the command line and
  `.run()` runs it, raising `subprocess.CalledProcessError` on failure.
  `detect_xfel()` checks that `xfel` can be started and raises
  `XfelNotFoundError` if it is missing.

## What it does not do

`sbiproto` only edits the configuration. It has no command that builds the
firmware or flashes it to a board; the `Xfel` helpers can be used to send
images to a board by hand.