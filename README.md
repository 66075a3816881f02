# memov2

Keep memos and daily todo lists as plain Markdown files on disk, and search
them with queries typed in romaji.

Memos are named after the moment they were created
(`20240115Mon103000_memo_My-Title.md`; spaces in the title become `-`) and
carry a small YAML front matter block that records their category path:

```markdown
---
category: ["work", "meetings"]
---

# My Title

## Notes

...
```

Todo files are named after their day (`20240115Mon_todos.md`). The todo
template, `todos_template.md`, holds a `todos` and a `wanttodos` section. The
weekly report is written as `weekly_report.md`.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Configuration

Settings live in `~/.config/memov2/config.toml`. The first time
`memov2.config.load_toml_config()` runs, the file is written with defaults and
the base, todos and memos directories are created:

```toml
base_dir = "/home/you/.config/memov2/dailymemo"
todos_foldername = "todos/"
memos_foldername = "memos/"
todos_daystoseek = 10
```

`TomlConfig.todos_dir()` and `TomlConfig.memos_dir()` join the base directory
with the folder names. `new_toml_config(TomlConfigOption(...))` builds a
configuration from the defaults with the given non-empty options applied.

## Command line

Show the settings in effect (the config file is created first if missing):

```
memov2 config show
```

Open the configuration file in `vim`:

```
memov2 config edit
```

## Using it from Python

```python
from datetime import datetime

from memov2.config import load_toml_config
from memov2.domain import new_memo_file, new_todos_file
from memov2.repository import new_repositories

config = load_toml_config()
repos = new_repositories(config)

memo = new_memo_file(datetime.now(), "Weekly sync", ["work", "meetings"])
repos.memo.save(memo, False)   # writes only if the file does not exist yet

todo = new_todos_file(datetime.now())
repos.todo.save(todo, True)    # overwrites an existing file
```

Memos are stored under a folder per category level, so the memo above lands in
`<memos_dir>/work/meetings/`. `MemoRepository.remove_empty_directories()`
deletes category folders that have become empty.

`memov2.editor.DEO.open(basedir, path)` opens a file in the `code` editor with
`basedir` as its folder.

### Search

`memov2.search.search_memos(memos, query, romaji_conv)` looks for every word of
a query in each memo's title, category path, headings and body lines,
case-insensitively, and returns the matching memos newest first. With a
`memov2.romaji.RomajiConverter` each word is also tried as hiragana, as
katakana and as the kanji candidates of an SKK dictionary; with a dictionary
that lists `かいぎ`, the query `kaigi` finds `会議`. Load a dictionary file of
your choice with `RomajiConverter.from_file(path)`, or pass a mapping built by
`parse_skk_dictionary(lines)`.

`memov2.render.render_results(results, selected, query, romaji_conv)` turns
the results into a text listing with the matched parts highlighted in
terminal colours.

## What it does not do

- The only command is `memov2 config` with `show` and `edit`. There are no
  commands to create memos or todo lists, build weekly reports or an index;
  use the Python classes above.
- There is no interactive browser or search screen; searching and rendering
  are library functions.
- Memos and todo lists are only written, not read back: the package does not
  scan the memos or todos directories, parse existing Markdown files, fill a
  new todo list from the template, or move memos between categories.
- No SKK dictionary ships with the package.