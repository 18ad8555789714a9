"""File templates for the Go project generator.

Each function returns the complete text of one generated file.  Output depends
only on the arguments, except :func:`license_text` which defaults to the
current calendar year.
"""

from __future__ import annotations

from datetime import date

from .templates import render

GO_VERSION = "1.21"
TINT_VERSION = "v1.1.2"


_MAIN_GO = """\
package main

import (
	"fmt"
	"log/slog"
	"os"

	"github.com/lmittmann/tint"
)

func init() {
	// Structured logging with colored output
	slog.SetDefault(slog.New(
		tint.NewHandler(os.Stderr, &tint.Options{
			Level:      slog.LevelInfo,
			TimeFormat: "15:04:05.0000",
			NoColor:    false,
			AddSource:  false,
		}),
	))
}

func main() {
	slog.Info("Starting {{ project_name }}")
	fmt.Println("Hello from {{ project_name }}!")
}
"""

_MAIN_TEST_GO = """\
package main

import "testing"

func TestProjectInitialized(t *testing.T) {
	t.Log("{{ project_name }} initialized successfully")
}
"""

_GO_MOD = """\
module {{ module_path }}

go {{ go_version }}

require github.com/lmittmann/tint {{ tint_version }}
"""

_README = """\
# {{ project_name }}

Created with projstarter

Module: `{{ module_path }}`

## Installation

```bash
go mod tidy
```

## Usage

```bash
go run ./cmd/{{ project_name }}
```

## Testing

```bash
go test ./...
```

## License

MIT
"""

_LICENSE = """\
MIT License

Copyright (c) {{ year }}

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

_GITIGNORE = """\
# Binaries
bin/
*.exe
*.exe~
*.dll
*.so
*.dylib

# Test binary
*.test

# Output
*.out

# Go workspace file
go.work

# IDE
.idea/
.vscode/
*.swp
*.swo
*~

# OS
.DS_Store
Thumbs.db
"""


def main_go(project_name: str) -> str:
    """``cmd/<name>/main.go``: entry point with slog + tint logging."""
    return render(_MAIN_GO, project_name=project_name)


def main_test_go(project_name: str) -> str:
    """``cmd/<name>/main_test.go``: a single passing test."""
    return render(_MAIN_TEST_GO, project_name=project_name)


def go_mod(module_path: str) -> str:
    """``go.mod`` declaring *module_path*."""
    return render(
        _GO_MOD,
        module_path=module_path,
        go_version=GO_VERSION,
        tint_version=TINT_VERSION,
    )


def readme(project_name: str, module_path: str) -> str:
    return render(_README, project_name=project_name, module_path=module_path)


def license_text(year: int | None = None) -> str:
    """MIT license text stamped with *year* (defaults to this year)."""
    if year is None:
        year = date.today().year
    return render(_LICENSE, year=year)


def gitignore() -> str:
    return _GITIGNORE
