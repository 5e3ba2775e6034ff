# mcml

Building blocks for a Minecraft launcher, each usable on its own:

- `mcml.log`: a background file logger that appends to `logs.log` in a run directory.
- `mcml.core`: version constants (`VERSION`, `VERSION_NUM`, `DATE`) and one-time core initialisation.
- `mcml.events`: stop handlers, run in registration order by `invoke_stop()`.
- `mcml.config`: the launcher configuration (Java list, network, DNS, launch arguments, game window) and its JSON form.
- `mcml.downloader`: download items, tasks, worker slots and a manager that cancels them on stop.
- `mcml.skin_draw`: pixel primitives on Pillow `RGBA` images (copy, blend, fill, nearest-neighbour scale).
- `mcml.portraits`, `mcml.skin_2d`, `mcml.head_3d`: renders of capes, heads, whole-body front views and a three-quarter 3D head from skin textures.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Core initialisation

```python
from mcml import core

core.init(core.CoreInitObj(local="/path/to/run/dir", oauth_key="placeholder", curseforge_key="placeholder"))
print(core.base_dir(), core.VERSION)
```

`init` raises `CoreInitError` when `local` is empty or when the core was
already initialised, and starts the process-wide logger in `local`.

## Logging

```python
from mcml import log

log.start("/path/to/run/dir")
log.info("launcher started")
log.warn("low memory")
log.stop()
```

Entries are written by a background thread, one per line, as
`[Y-M-D H:M:S][Level]message` with levels `Info`, `Warn`, `Error` and `Fault`.
`stop()` writes what is still queued and closes the file. A separate
`log.Logger` instance can be used instead of the module-level functions.

## Stop handlers

```python
from mcml import events

events.add_stop_handler(lambda: print("shutting down"))
events.invoke_stop()
```

## Configuration

```python
from mcml.config import ConfigObj, SourceLocal

config = ConfigObj()
config.http.source = SourceLocal.BMCLAPI
text = config.to_json()

restored = ConfigObj.from_json(text)
assert restored.http.source is SourceLocal.BMCLAPI
```

JSON keys use the launcher's names (`"Http"`, `"DownloadThread"`,
`"DefaultJvmArg"`, ...). Missing keys fall back to defaults; values of the
wrong type or out of range raise `ValueError`. Enumerations (`SourceLocal`,
`GCType`) are stored as integers. A new `ConfigObj` carries launch arguments
from `RunArgObj.with_defaults()`; `RunArgObj()` leaves every field `None`.

## Downloads

```python
from mcml.downloader import DownloadItem, DownloadManager, DownloadTask, DownloadThread

item = DownloadItem("client.jar", "https://example.com/client.jar", "/games/client.jar").with_overwrite(True)
item.all_size = 100
task = DownloadTask()
task.add_item(item)
print(task.progress())

manager = DownloadManager(threads=[DownloadThread(0)], tasks=[task])
manager.init()          # stop with the core's stop handlers
manager.stop()          # clears pending items, cancels tasks, stops workers
print(task.cancelled, manager.get_state())
```

GUI callbacks are described by the `DownloadGuiHandler` and
`ProgressGuiHandler` protocols; updates are `AddItem(count)` and `ItemDone()`.

## Skin rendering

```python
from PIL import Image
from mcml.portraits import draw_cape_2d, head_2d_draw_typea
from mcml.skin_2d import SkinType, skin_2d_draw_typea
from mcml.head_3d import draw_head_3d

skin = Image.open("skin.png").convert("RGBA")
head_2d_draw_typea(skin).save("head.png")                        # 128x128
skin_2d_draw_typea(skin, SkinType.NEW_SLIM).save("body.png")     # 128x256
draw_head_3d(skin).save("head_3d.png")                           # 400x400
draw_cape_2d(Image.open("cape.png")).save("cape_front.png")     # 160x256
```

The skin type (`SkinType.OLD`, `NEW` or `NEW_SLIM`, or the strings `"Old"`,
`"New"`, `"NewSlim"`) must be given. Regions that fall outside an image raise
`SkinDrawError`.

## What this package does not do

- It does not fetch anything over the network: `mcml.downloader` keeps
  track of items, sizes, progress and cancellation, but performs no transfers
  and does not check hashes.
- It does not detect a skin's layout from its texture; the caller chooses the
  `SkinType`.
- It does not read or write a configuration file by itself; `ConfigObj`
  converts to and from JSON text only.
- It has no command-line program and no graphical interface.