# droptube

A small command-line tool for downloading YouTube videos to local storage.
It builds the right options for `yt-dlp`, runs it, and shows a progress bar
while the download runs.

## Requirements

- Python 3.10 or later
- `yt-dlp` installed and available on your `PATH`

## Installation

```
pip install .
```

This installs the `drop-tube` command.

## Usage

```
drop-tube [OPTIONS] <YouTube URL>
```

Exactly one URL is required. Backslashes left over from shell escaping
(for example `watch\?v\=abc`) are removed before the URL is handed to
`yt-dlp`.

### Options

| Option | Default | Meaning |
| --- | --- | --- |
| `-o`, `--output DIR` | `.` | Output directory; made absolute and created if it does not exist |
| `-f`, `--format FMT` | `best` | Video format (`mp4`, `webm`, `best`) |
| `-q`, `--quality Q` | `best` | Video quality (`720p`, `1080p`, `best`) |
| `-a`, `--audio-only` | off | Download audio only |
| `--audio-format FMT` | `mp3` | Audio format (`mp3`, `m4a`) |
| `--playlist` | off | Download the entire playlist |
| `-v`, `--verbose` | off | Log the configuration and command, and show `yt-dlp`'s own output instead of a progress bar |

### Examples

Download the best available version into the current directory:

```
drop-tube "https://www.youtube.com/watch?v=VIDEO_ID"
```

Download a 720p MP4 into `~/Videos`:

```
drop-tube -f mp4 -q 720p -o ~/Videos "https://www.youtube.com/watch?v=VIDEO_ID"
```

Extract the audio as M4A:

```
drop-tube -a --audio-format m4a "https://www.youtube.com/watch?v=VIDEO_ID"
```

Files are saved as `<title>.<ext>` in the output directory, and on success
the command prints `download completed successfully in <directory>`. It
exits with status 1 and prints `Error: ...` to standard error if the command
line is wrong, the output directory cannot be created, `yt-dlp` is missing,
or the download fails.

### How format and quality combine

| `--format` | `--quality` | Format selector passed to `yt-dlp` |
| --- | --- | --- |
| `best` | `best` | `best` |
| `best` | `1080p` | `bestvideo[height<=1080]+bestaudio/best[height<=1080]` |
| `mp4` | `best` | `best[ext=mp4]` |
| `mp4` | `720p` | `bestvideo[ext=mp4][height<=720]+bestaudio/best[ext=mp4][height<=720]` |

With `--audio-only`, `--extract-audio --audio-format <FMT>` is passed
instead and format and quality are ignored.

## Using it from Python

```python
from droptube.config import Config
from droptube.downloader import Downloader

config = Config(url="https://www.youtube.com/watch?v=VIDEO_ID", quality="1080p")
config.validate()
Downloader(config).download()
```

- `Config.validate()` raises `droptube.config.ConfigError` when the URL is
  empty or the output directory cannot be created.
- `Downloader.download()` raises `droptube.downloader.DownloadError` when
  `yt-dlp` is unavailable or exits with a non-zero status.
- `Downloader.build_args()` returns the `yt-dlp` arguments without running
  anything, and `Downloader.build_format_spec()` returns only the format
  selector.
- `droptube.downloader` also offers `extract_height()`, `clean_url()` and
  `parse_progress()` for working with quality strings, URLs and `yt-dlp`
  progress lines.
- `droptube.cli.main(argv)` runs the command with the given arguments and
  returns its exit status.
- `droptube.utils` has `ensure_dir()`, `is_valid_dir()` and
  `get_absolute_path()` filesystem helpers.

## What it does not do

droptube does not fetch or decode video itself: all downloading, format
selection and audio extraction is done by the external `yt-dlp` program.
Without `yt-dlp` on the `PATH`, no download can take place.