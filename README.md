# shargpy

A small library for parsing command lines. An application registers its options, flags and positional arguments up front. Each one has a typed value and an optional validator. The parser then works through the command line in a fixed order:

1. options, in the order they were added;
2. flags, in the order they were added;
3. positional arguments, in the order they were added.

Every argument that is used is removed. Anything unknown or left over is reported as a specific exception.

## Installation

```
pip install shargpy
```

To run the test suite, install the `test` extra (`pip install shargpy[test]`) and run `pytest`.

## Usage

```python
from shargpy.config import Config
from shargpy.parse import FormatParse
from shargpy.errors import ParserError

args = {"age": 30, "names": [], "verbose": False}

parser = FormatParse(["-a", "42", "--verbose", "alice", "bob"])
parser.add_option(args, "age", Config(short_id="a", long_id="user-age"))
parser.add_flag(args, "verbose", Config(short_id="v", long_id="verbose"))
parser.add_positional_option(args, "names")

try:
    parser.parse()
except ParserError as error:
    print(f"[PARSER ERROR] {error}")

# args == {"age": 42, "names": ["alice", "bob"], "verbose": True}
```

Each value is stored on a target under a name. The target can be an object, in which case the value is stored as an attribute. It can also be a mapping, in which case the value is stored under a key.

The value type is taken from the value the target holds when the entry is registered:

- `bool`, `int`, `float`, `str`, paths and `Enum` members are recognised.
- A plain `int` is read as a signed 32 bit integer.
- To choose a type yourself, pass `kind`. This can be, for example, `shargpy.values.UINT8` or a `pathlib.Path`.

## What is inside

### `shargpy.config.Config`

`Config` is a frozen dataclass that describes one entry. Its fields are:

- `short_id`: a single character.
- `long_id`.
- `description` and `default_message`.
- `advanced`, `hidden` and `required`.
- `validator`: a callable given the parsed value. It raises when the value is not acceptable.

`default_validator` accepts every value.

### `shargpy.parse.FormatParse`

Register entries with `add_option`, `add_flag` and `add_positional_option`, then call `parse()`. The rules are:

- Short options may be written as `-iValue`, `-i=Value` or `-i Value`.
- Long options may be written as `--id=Value` or `--id Value`.
- Short flags can be grouped, so `-rGv` means `-r -G -v`.
- A `--` ends option parsing. Everything after it is positional.
- An option whose target holds a list may be given several times. Each time it is given, one more value is added.
- A single-valued option given twice is an error.
- A list positional option takes all remaining arguments. Only the last positional option may be a list.
- Positional options may not have identifiers, a default message, or the advanced or hidden setting. Giving them any of these raises `DesignError`.

`find_option_id(arguments, option_id)` returns the index of the first argument that names an identifier such as `-o` or `--out`. It returns `None` if no argument does.

### `shargpy.values`

- `parse_value(kind, text)` returns a `ParseResult` together with the value.
- `convert_value(kind, text, option_name)` raises `UserInputError` with a descriptive message on failure.
- Booleans accept `0`, `1`, `true` and `false`.
- Enumerations are read by member name. An unknown name lists the valid ones.
- `IntType` describes a fixed-width integer. It has `minimum`, `maximum` and `contains`. The predefined ones are `INT8` … `INT64` and `UINT8` … `UINT64`.
- `type_name(kind)` gives the names used in messages, such as `signed 32 bit integer` or `List of std::string`.

### `shargpy.charconv`

- `int_from_chars` and `float_from_chars` read a number at the start of a text.
- They return a `CharsResult` holding the value and the number of characters consumed.
- A leading `+` or whitespace is rejected.
- `float_from_chars` also reads `inf`, `infinity` and `nan` in any case.
- `float_from_chars` raises `OverflowError` for values out of range.
- `float_to_chars` writes the shortest text that reads back to the same float.

### `shargpy.errors`

All exceptions derive from `ParserError`. Mistakes in setting up the parser raise `DesignError`.

Mistakes in the user's input raise `UserInputError` or one of its subclasses:

- `TooFewArguments`
- `TooManyArguments`
- `UnknownOption`
- `OptionDeclaredMultipleTimes`
- `RequiredOptionMissing`
- `ValidationError`

### `shargpy.html`

`HtmlFormat` writes help page elements as HTML to a stream, which is standard output by default. Its methods are:

- `print_header`
- `print_section` and `print_subsection`
- `print_line`
- `print_list_item`
- `print_footer`
- `in_bold`

`to_html` turns console markup into HTML. `\fB` starts bold and `\fI` starts italics. `\fP` closes the last one started. `\-` becomes a dash.

`escape_xml` escapes the XML special characters.

### `shargpy.version`

- `version_number(major, minor, patch)` packs a version into one integer.
- `version_string(...)` formats a version, with an `-rc.N` suffix for release candidates.
- `SHARG_VERSION` and `SHARG_VERSION_STRING` hold the library's own version.

## Example application

The package installs a command, `shargpy-viewers`. It aggregates viewer numbers from a tab-separated data file.

Each data line needs at least five columns, in this order:

1. season
2. episode
3. air date
4. year
5. viewers

To take the median of all rows from 2015 onwards, skipping a header line:

```
shargpy-viewers data.tsv -y 2015 -a median -H
```

To take the mean over chosen seasons (the default method is `mean`):

```
shargpy-viewers data.tsv -s 3 -s 5
```

| Option | Meaning |
|---|---|
| `-y/--year` | Keep rows whose year is at least this value (default 0). |
| `-s/--season` | Keep rows of these seasons; may be repeated. When given, the year is not used. |
| `-a/--aggregate-by` | `mean` or `median`. The median is the upper middle value. |
| `-H/--header-is-set` | Skip the first line of the file. |

The result is written to standard error. A command-line mistake is reported on standard error with the prefix `[Winter has come]`, and `main` returns -1.

The same steps are available as functions in `shargpy.viewers`:

- `select_by_year` and `select_by_seasons` pick the viewer numbers from the lines of the file.
- `aggregate` reduces them to a single number.

## What it does not do

- `FormatParse` does not treat `-h`, `--help`, `--version` or `--copyright` specially. It prints no help pages of its own. These arguments are reported as unknown options unless you register them yourself.
- `HtmlFormat` only provides the pieces for writing an HTML page. Nothing assembles a page from the registered options.
- There is no support for subcommands.
- There are no ready-made validators. Any callable can be used as a validator.