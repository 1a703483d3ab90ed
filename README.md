# sdkswitch

`sdkswitch` is a library of the pieces an SDK version manager is built from:

- **Shell integration** (`sdkswitch.shell`) for bash, zsh, fish, PowerShell,
  clink and Nushell. Each shell produces an activation hook and turns a set of
  environment variables into code the shell evaluates.
- **Shell processes** (`sdkswitch.shell.process`): find the executable of a
  running shell and start a new instance of it.
- **Shims** (`sdkswitch.shim`) that expose SDK binaries through one shared
  directory as symlinks.
- **Packages and locations** (`sdkswitch.package`, `sdkswitch.scope`): the main
  SDK and its additional file sets, linked into a global or per-session location.
- **Registry data** (`sdkswitch.registry`): parsing of a plugin registry index
  and plugin manifests.
- **Plugin helper modules** (`sdkswitch.modules`): string utilities, a JSON
  codec with strict table rules, an HTML query helper, an HTTP client and a
  file operation helper.
- **An interactive picker** (`sdkswitch.printer.select`): a paged,
  fuzzy-searchable terminal selection list.

Install with `pip install .`; the test dependencies are in the `test` extra.

## Shell integration

```python
from sdkswitch.shell.factory import new_shell
from sdkswitch.shell.base import ActivateConfig

shell = new_shell("bash")
hook = shell.activate(ActivateConfig(self_path="/usr/local/bin/tool"))

script = shell.export({"JAVA_HOME": "/opt/java/21", "OLD_VAR": None})
# export JAVA_HOME=$'/opt/java/21';unset OLD_VAR;
```

`new_shell` accepts `bash`, `zsh`, `fish`, `pwsh`, `clink` and `nushell` in
any letter case and returns `None` for any other name. A value of `None` in
the mapping given to `export` unsets the variable (clink assigns it an empty
value instead).

Quoting follows each shell's rules:

```python
from sdkswitch.shell.bash import bash_escape
from sdkswitch.shell.fish import fish_escape
from sdkswitch.shell.powershell import powershell_escape

bash_escape("")            # "''"
bash_escape("a b")         # "$'a b'"
fish_escape("it's")        # "'it\\'s'"
powershell_escape("C:\\")  # "'C:\\'"
```

Bash quoting writes control characters as ANSI escapes and non-ASCII bytes as
hex codes, so the result is always one line of ASCII.

Nushell cannot evaluate scripts, so `NushellShell.export` returns a JSON
document with `envsToSet` and `envsToUnset`; the `PATH` entry is split into a
list and stored as `Path` on Windows. `NushellShell.activate` writes a
`vfox.nu` script into the directory given as the first element of
`ActivateConfig.args` (raising `ValueError` if there is none) and returns the
snippet that sources it.

`shell_executable(pid)` returns the executable of a process, and
`open_shell(pid)` runs a new instance of it and waits for it to exit; both
raise `OSError` on failure.

## Packages, locations and shims

```python
from sdkswitch.package import Info, Package, LocationPackage, location_path
from sdkswitch.scope import Location

pkg = Package(main=Info(name="java", version="21", path="/sdks/java/v-21/java-21"))
target = location_path(Location.GLOBAL, "/sdks/java", "/tmp/session", "java")
linked = LocationPackage(pkg, target, Location.GLOBAL).link()
```

`convert_location()` computes the linked paths without touching the disk;
`link()` replaces what is at the target and creates the symlinks.
`check_package_valid` tells whether every file set of a package exists.
`UseScope` names where a chosen version is recorded (global, project, session).

```python
from sdkswitch.shim import Shim

shim = Shim("/opt/java/21/bin/java", "/home/me/.shims")
shim.generate()   # removes any old shim, then creates the symlink
shim.clear()      # removes the shim if it is present
```

## Registry data

`parse_index` and `parse_manifest` take JSON text or decoded data and return
`RegistryIndexItem` objects and a `RegistryPluginManifest`; anything of the
wrong shape raises `ValueError`.

## Plugin helper modules

```python
from sdkswitch.modules import strings, json, html

strings.split("hello world", " ")      # ["hello", "world"]
strings.trim("hello world", "world")   # "hello "
strings.join(["1", 3, "4"], ";")       # "1;3;4"

json.encode([1, 2, 3])                 # "[1,2,3]"
json.encode({})                        # "[]"
json.decode('{"name": "Tim"}')         # {"name": "Tim"}

doc = html.parse("<div id='t'>hello world</div><div>222</div>")
doc.find("#t").text()                  # "hello world"
doc.find("div").eq(1).text()           # "222"
doc.find("div").attr("missing")        # None
```

`json.encode` raises `JsonEncodeError` for sparse arrays, mixed or invalid key
types, and containers that contain themselves; `json.decode` returns every
number as a float.

`FileOperation(root_path).symlink(src, dest)` creates a symlink with both
paths taken below the root.

`HttpModule` offers `get`, `head` and `download_file`, optionally through a
`proxy_url`. `get` and `head` return an `HttpResponse` with the status code,
headers, content length and (for `get`) body. `download_file` writes the body
to a file, reporting progress on standard error, and raises
`FileNotFoundError` when the server answers 404. A missing URL raises
`ValueError`.

## Interactive selection

`PageKVSelect` shows `KV` items one page at a time, fetching each page through
its `source_func(page, size, options)`. With `filterable=True` typing
fuzzy-searches; the arrow keys move and page, and Enter confirms. `show()`
returns the chosen item, or `None` if the user cancels with Ctrl+C. The state
can also be driven without a terminal through `handle_key` and `render`.

## What this package does not do

There is no command-line program and no plugin runtime: nothing here loads or
runs plugin scripts, installs or uninstalls SDK versions, or records which
version is in use. The helper modules and classes are meant to be called by a
program that does those things.