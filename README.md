# polaris

A small application engine built on pygame. It opens a resizable window,
runs an event loop that renders a frame on every pass, and tells your
application when its window is ready and when it is about to go away.
A leveled logger writes to the console and to a log file.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running the demo

```
polaris
polaris --log-file run.log
```

This opens an 800×600 window titled "Vega42" and fills it with red. Close
the window or press any key to quit. Log lines are appended to
`vega42.log` in the current directory unless `--log-file` names another
file. The command exits with status 1 if the display or the window could
not be created, and 0 otherwise.

## Writing an application

Subclass `Application` from `polaris.application` and override the hooks
you need:

```python
from polaris.application import Application


class MyApp(Application):
    def on_created(self):
        super().on_created()
        # the window is available as self.window here

    def on_destroy(self):
        super().on_destroy()
        # release your own resources here


app = MyApp()
app.initialize()
app.run()
```

`initialize()` hands the application to its `Engine`, which starts the
display, creates a hidden window and calls `set_window()` on the
application. `set_window()` stores the window, calls `on_created()` and then
shows the window; it raises `ValueError` if given `None`. If the engine
fails to start, `initialize()` logs the failure and re-raises the
`RuntimeError`.

`run()` drives the event loop until a quit event or a key press, rendering
one frame per pass, then calls `Engine.shutdown()`, which calls
`on_destroy()` before closing the display. Calling `Engine.run()` before
`Engine.initialize()` raises `RuntimeError`.

An `Application` creates its own `Engine` unless one is passed in.
`Engine` takes an optional `renderer_factory` (default `SurfaceRenderer`),
`title` and `size`, and exposes `window`, `renderer` and `application`.

## Renderers

`polaris.renderer` holds two renderers.

`PlatformRenderer` is the base renderer; its `render_frame()` does nothing.
Its `create_renderer(window)` registers a shared base renderer, which
`PlatformRenderer.get_instance()` then returns; before that it returns
`None`.

`SurfaceRenderer` draws into a pygame surface. `create_renderer(window)`
attaches it and raises `RuntimeError` if `window` is not a surface.
`render_frame()` clears the surface to red and, when the surface is the
display, presents it; it raises `RuntimeError` if no surface is attached.
`destroy()` releases the surface and shuts pygame down.

## Logging

```python
from polaris.logger import Logger, LogLevel

log = Logger.get_instance()
log.initialize("vega42.log")
log.set_log_level(LogLevel.DEBUG)
log.debug("starting up")
log.warn("something looks off")
log.shutdown()
```

Lines look like `[2025-06-23 14:05:09.123] [INFO] message` and go to stdout
and to the log file, which is opened for appending. If the file cannot be
opened, a note goes to stderr and only the console is written.

The levels, from lowest to highest, are `TRACE`, `DEBUG`, `INFO`, `WARN`,
`ERROR` and `CRITICAL`, and the default is `INFO`. Messages below the
current level are dropped, and nothing is written until the logger is
initialized or after it is shut down. `log_to_console()` and
`log_to_file()` write one line to a single destination regardless of the
current level.

## What it does not do

Rendering is limited to clearing the window to a single colour through
pygame's surfaces; there is no scene, sprite or GPU drawing layer. The
event loop only reacts to quit, key presses (which also quit) and window
resizes, which are logged.