"""File templates for the Vite + Elm + Tailwind project generator."""

from __future__ import annotations

from .templates import render

ELM_VERSION = "0.19.1"


_PACKAGE_JSON = """\
{
  "name": {{ project_name|tojson }},
  "version": "1.0.0",
  "type": "module",
  "scripts": {
    "dev": "vite",
    "build": "vite build",
    "test": "elm-test",
    "postinstall": "elm-tooling install"
  },
  "devDependencies": {
    "@tailwindcss/vite": "^4.1.16",
    "elm-tooling": "^1.16.0",
    "tailwindcss": "^4.1.16",
    "vite": "^7.1.12",
    "vite-plugin-elm-watch": "^1.4.3"
  }
}
"""

_VITE_CONFIG = """\
import { defineConfig } from 'vite'
import tailwindcss from '@tailwindcss/vite'
import elmWatch from 'vite-plugin-elm-watch'

export default defineConfig({
  plugins: [
    tailwindcss(),
    elmWatch()
  ]
})
"""

_INDEX_HTML = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{ project_name|e }}</title>
</head>
<body>
  <div id="app"></div>
  <script type="module" src="/src/main.js"></script>
</body>
</html>
"""

_MAIN_JS = """\
import './style.css'
import { Elm } from './Main.elm'

Elm.Main.init({
  node: document.getElementById('app')
})
"""

_STYLE_CSS = """\
@import "tailwindcss";

body {
  margin: 0;
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Roboto', 'Oxygen',
    'Ubuntu', 'Cantarell', 'Fira Sans', 'Droid Sans', 'Helvetica Neue',
    sans-serif;
  -webkit-font-smoothing: antialiased;
  -moz-osx-font-smoothing: grayscale;
}
"""

_MAIN_ELM = """\
module Main exposing (main)

import Browser
import Html exposing (Html, button, div, h1, text)
import Html.Attributes exposing (class)
import Html.Events exposing (onClick)


-- MAIN


main : Program () Model Msg
main =
    Browser.sandbox
        { init = init
        , view = view
        , update = update
        }


-- MODEL


type alias Model =
    { count : Int
    }


init : Model
init =
    { count = 0
    }


-- UPDATE


type Msg
    = Increment
    | Decrement


update : Msg -> Model -> Model
update msg model =
    case msg of
        Increment ->
            { model | count = model.count + 1 }

        Decrement ->
            { model | count = model.count - 1 }


-- VIEW


view : Model -> Html Msg
view model =
    div [ class "min-h-screen bg-gray-100 flex items-center justify-center" ]
        [ div [ class "bg-white p-8 rounded-lg shadow-lg" ]
            [ h1 [ class "text-3xl font-bold text-center mb-6 text-gray-800" ]
                [ text "Elm + Vite + Tailwind" ]
            , div [ class "flex items-center justify-center gap-4" ]
                [ button
                    [ onClick Decrement
                    , class "px-4 py-2 bg-red-500 text-white rounded hover:bg-red-600"
                    ]
                    [ text "-" ]
                , div [ class "text-2xl font-mono w-16 text-center" ]
                    [ text (String.fromInt model.count) ]
                , button
                    [ onClick Increment
                    , class "px-4 py-2 bg-green-500 text-white rounded hover:bg-green-600"
                    ]
                    [ text "+" ]
                ]
            ]
        ]
"""

_ELM_JSON = """\
{
    "type": "application",
    "source-directories": [
        "src"
    ],
    "elm-version": "{{ elm_version }}",
    "dependencies": {
        "direct": {
            "elm/browser": "1.0.2",
            "elm/core": "1.0.5",
            "elm/html": "1.0.0"
        },
        "indirect": {
            "elm/json": "1.1.3",
            "elm/time": "1.0.0",
            "elm/url": "1.0.0",
            "elm/virtual-dom": "1.0.3"
        }
    },
    "test-dependencies": {
        "direct": {},
        "indirect": {}
    }
}
"""

_ELM_TOOLING_JSON = """\
{
  "tools": {
    "elm": "{{ elm_version }}",
    "elm-format": "0.8.7",
    "elm-json": "0.2.13"
  }
}
"""

_GITIGNORE = """\
# Dependencies
node_modules/
elm-stuff/

# Build output
dist/

# Elm
.elm-spa/

# IDE
.idea/
.vscode/
*.swp
*.swo
*~

# OS
.DS_Store
Thumbs.db

# Logs
npm-debug.log*
yarn-debug.log*
yarn-error.log*
"""

_README = """\
# {{ project_name }}

Vite + Elm + Tailwind CSS project

## Setup

```bash
npm install
```

## Development

```bash
npm run dev
```

Open http://localhost:5173

## Build

```bash
npm run build
```

## Testing

```bash
npm test
```

## Stack

- [Vite](https://vitejs.dev/) - Build tool
- [Elm](https://elm-lang.org/) - Functional programming language
- [Tailwind CSS](https://tailwindcss.com/) - Utility-first CSS framework
- [vite-plugin-elm-watch](https://github.com/ChristophP/vite-plugin-elm-watch) - Hot reload for Elm
- [elm-tooling](https://elm-tooling.github.io/elm-tooling-cli/) - Elm tools installer

## License

MIT
"""


# ---------------------------------------------------------------------------
# Manifests and build config
# ---------------------------------------------------------------------------


def package_json(project_name: str) -> str:
    """``package.json`` with dev/build/test scripts and the Vite toolchain."""
    return render(_PACKAGE_JSON, project_name=project_name)


def vite_config() -> str:
    return _VITE_CONFIG


def elm_json() -> str:
    """``elm.json`` for a browser application rooted at ``src/``."""
    return render(_ELM_JSON, elm_version=ELM_VERSION)


def elm_tooling_json() -> str:
    return render(_ELM_TOOLING_JSON, elm_version=ELM_VERSION)


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------


def index_html(project_name: str) -> str:
    """``index.html`` titled *project_name*, mounting the app on ``#app``."""
    return render(_INDEX_HTML, project_name=project_name)


def main_js() -> str:
    return _MAIN_JS


def style_css() -> str:
    return _STYLE_CSS


def main_elm() -> str:
    """``src/Main.elm``: a ``Browser.sandbox`` counter."""
    return _MAIN_ELM


# ---------------------------------------------------------------------------
# Repository files
# ---------------------------------------------------------------------------


def gitignore() -> str:
    return _GITIGNORE


def readme(project_name: str) -> str:
    return render(_README, project_name=project_name)
