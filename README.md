# aurakit

Building blocks for desktop applications. One object holds your
application's identity and gives it logging, translations, per-user
directories, JSON configuration and single-instance communication. Other
modules cover file watching, simple web requests and notification data.

## Installation

```
pip install aurakit
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install aurakit[test]
pytest
```

## Getting started

```python
from aurakit.aura import Aura
from aurakit.logger import LogLevel

aura = Aura.get_active()
aura.init("org.example.notes", "Notes", "Notes", LogLevel.INFO)

aura.logger().log(LogLevel.INFO, "Application started")
print(aura.help_url("index"))
```

`Aura.get_active()` always returns the same instance. Call `init` once at
start-up; later calls change nothing. `init` does the following:

- records the directory of the running program;
- sets the id, name and English short name on `app_info()`;
- starts the translation domain, which is the English short name in lower
  case with its spaces removed;
- deletes any old `log.txt` in the application's cache directory and logs to
  a new one.

`aura.logger()` raises `RuntimeError` before `init`.

`Aura` has more methods:

- `find_dependency(name)` looks for a program beside the executable and then
  on `PATH`. It returns `None` when the program is not found.
- `ipc()` returns the application's `InterProcessCommunicator` and creates it
  on first use.
- `is_running_on_windows`, `is_running_on_linux` and `is_running_on_mac`
  report the platform.
- `is_running_via_flatpak`, `is_running_via_snap` and `is_running_via_local`
  report how the application was installed.

## Modules

- `aurakit.stringhelpers`: string tools.
  - `encode` and `decode` for base64. `decode` accepts both the standard and
    the url-safe alphabet.
  - `is_valid_url`, `join`, `split` and `replace`.
  - `split_args` splits a command line and honours single and double quotes.
  - `trim`, `lower` and `upper`.
  - `stoui` parses an unsigned 32-bit integer.
  - `new_guid` returns a new GUID.
- `aurakit.codehelpers`: `read_file_bytes` and `write_file_bytes`. They report
  failure by their return value. `last_system_error` gives the message of the
  last OS error they met.
- `aurakit.logger`: `Logger` and `LogLevel`.
  - Messages below the minimum level are dropped.
  - Each message is prefixed with a timestamp, the level and the calling
    location.
  - Errors and critical messages go to standard error, the rest to standard
    output.
  - Messages are also appended to a file when you give the logger a path.
- `aurakit.localization`: gettext for one domain. It has `init`,
  `domain_name`, `translate`, `translate_plural`, `pgettext` and `pngettext`.
- `aurakit.systemdirectories`: `path_dirs`, `config_dirs` and `data_dirs`,
  read from `PATH`, `XDG_CONFIG_DIRS` and `XDG_DATA_DIRS`.
- `aurakit.userdirectories`: the user's directories.
  - `home`, `config`, `cache` and `local_data`.
  - `application_config`, `application_cache` and `application_local_data`,
    which take the application name.
  - `desktop`, `documents`, `downloads`, `music`, `pictures`, `templates` and
    `videos`. These follow the XDG variables and `user-dirs.dirs`, and are
    created when missing.
  - `runtime` and `public_share`, which are not created and return `None`
    outside Linux.
- `aurakit.appinfo`: `AppInfo`, the application's metadata.
  - Setting `changelog` also renders `html_changelog` from markdown.
  - `source_repo`, `issue_tracker` and `support_url` raise `ValueError` for an
    invalid url.
  - `translator_names()` takes the names out of `translator_credits`.
- `aurakit.configurationbase`: `ConfigurationBase(key, app_name)`.
  - It loads `<key>.json` from the application's configuration directory into
    `json`.
  - `save()` writes it back and then calls the handlers in `saved`.
- `aurakit.windowgeometry`: `WindowGeometry`, a dataclass with `width`
  (800), `height` (600) and `is_maximized` (False).
- `aurakit.ipc`: `InterProcessCommunicator(app_id)`.
  - The first instance serves on a Unix socket under `/tmp`, or on a named
    pipe on Windows.
  - Later instances are clients. `communicate(args, exit_if_client)` sends
    their arguments to the server, where the `command_received` handlers get
    the list.
- `aurakit.filesystemwatcher`: `FileSystemWatcher`.
  - It reports `FileSystemChangedEventArgs` (a path and a `FileAction`) to the
    handlers in `changed`.
  - You can narrow it with `WatcherFlags` and with extension filters.
- `aurakit.network`:
  - `CurlEasy` is a single HTTP request with a url, headers, user agent,
    output stream and progress callback. `perform()` returns the status code.
  - `WebClient` has `website_exists`, `fetch_json` and `download_file`.
  - `NetworkState` and `NetworkStateChangedEventArgs` hold network state data.
- `aurakit.notifications`: `NotificationSeverity`,
  `NotificationSentEventArgs` and `ShellNotificationSentEventArgs`.
- `aurakit.notifyiconmenu`: `NotifyIconMenu`, a tray context-menu model built
  from separator and action items.

## Single instance example

```python
import sys
from aurakit.ipc import InterProcessCommunicator

with InterProcessCommunicator("org.example.notes") as ipc:
    ipc.communicate(sys.argv[1:], True)  # a second instance exits here
```

## What it does not do

- It does not watch the system's network connection. `NetworkState` and its
  event arguments are plain data.
- It does not show desktop notifications or tray icons. The notification
  classes and `NotifyIconMenu` only describe them.
- It has no database layer and no command-line program.