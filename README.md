# rustdrill

Building blocks for a set of small Rust exercises, and worked Python solutions
to many of those exercises:

- `rustdrill.ui` — coloured status lines for the terminal
- `rustdrill.project` — generation of a `rust-project.json` file so that
  rust-analyzer understands loose exercise files
- `rustdrill.lessons` — Python counterparts of the exercises, grouped by topic

The package has no dependencies beyond the standard library.

## Installation

```
pip install rustdrill
```

## Terminal output: `rustdrill.ui`

```python
from rustdrill import ui

ui.success("Successfully ran exercises/intro/intro1.rs")
ui.warn("Compiling of exercises/if/if1.rs failed!")
print(ui.bold("`I AM NOT DONE`"), ui.blue("|"))
```

- `success(message)` prints a green line starting with ✅ and `warn(message)` a
  red line starting with ⚠️.
- `emoji_enabled()` is true unless the `NO_EMOJI` environment variable is set;
  without emoji the lines start with `✓` and `!` instead.
- `bold(text)` and `blue(text)` return the text wrapped in ANSI styling.

Styling is applied only when standard output is a terminal. Set `CLICOLOR=0`
to turn it off, or `CLICOLOR_FORCE=1` to force it on.

## rust-analyzer support: `rustdrill.project`

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()
project.exercises_to_json("./exercises")
project.write_to_disk("./rust-project.json")
```

- `get_sysroot_src()` takes the standard library source path from the
  `RUST_SRC_PATH` environment variable, or else runs `rustc --print sysroot`
  and appends `lib/rustlib/src/rust/library`.
- `exercises_to_json(exercises_dir)` adds one crate for every `.rs` file below
  the directory (default `./exercises`), in sorted path order.
- `add_path(path)` adds a single crate if the path ends in `.rs`.
- Each `Crate` uses edition 2021, no dependencies and the `test` cfg, so
  rust-analyzer also works inside test blocks; `Crate.to_dict()` gives its JSON
  form.
- `to_json()` returns the compact JSON text and `write_to_disk(path)` writes it
  (default `./rust-project.json`).

## Lesson solutions: `rustdrill.lessons`

| module | contents |
|---|---|
| `conversions` | `Person`, `default_person`, `person_from` (falls back to John, 30), `parse_person` (raises `ParsePersonError` with a `ParsePersonErrorKind`), `Color` and `color_from` (raises `IntoColorError` with an `IntoColorErrorKind`) |
| `errors` | `generate_nametag_text`, `total_cost`, `purchase`, `PositiveNonzeroInteger` (raises `CreationError`), `parse_pos_nonzero` (raises `ParsePosNonzeroError`) |
| `iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide` with `NotDivisibleError` and `DivideByZeroError`, `result_with_list`, `list_of_results`, `factorial`, `Progress` and the `count_*` functions |
| `maps` | `Fruit`, `fruit_basket`, `fill_fruit_basket`, `Team`, `build_scores_table` |
| `quizzes` | `calculate_price_of_apples`, `CommandKind`, `Command`, `transformer`, `ReportCard` |
| `fundamentals` | `trim_me`, `compose_me`, `replace_me`, `is_a_color_word`, `bigger`, `foo_if_fizz`, `animal_habitat`, `sale_price`, `is_even`, `square`, `longest`, `Rectangle` |
| `traits` | `append_bar`, `Licensed`, `SomeSoftware`, `OtherSoftware`, `compare_license_types`, `Wrapper` |
| `containers` | `array_and_vec`, `vec_loop`, `vec_map`, `Cons`, `create_empty_list`, `create_non_empty_list`, `Cow`, `abs_all`, `offset_sums`, `Queue`, `send_queue` |

For example:

```python
from rustdrill.lessons.conversions import parse_person
from rustdrill.lessons.quizzes import Command, CommandKind, transformer

parse_person("Mark,20")          # Person(name='Mark', age=20)
transformer([("foo", Command(CommandKind.APPEND, 1))])   # ['foobar']
```

## What this package does not do

There is no command-line program. The package does not read an exercise list,
compile or run exercises with `rustc`, lint them with Clippy, check for the
`I AM NOT DONE` marker, track progress, reset exercises, or watch files for
changes. It provides the styling helpers, the `rust-project.json` generator and
the lesson solutions only.

## Development

```
pip install -e ".[test]"
pytest
```