# cobalt

Building blocks for a static site generator. The package covers configuration, documents and frontmatter, source-tree walking, plain code-block rendering and a development file server.

- `cobalt.config.Config` loads `_cobalt.yml`.
  - `Config.from_file(path)` reads one file and makes the file's directory the `root`.
  - `Config.from_cwd(cwd)` searches `cwd` and each parent directory for `_cobalt.yml`. It uses the defaults, with `cwd` as the root, when it finds none.
  - `Config.from_dict` and `Config.to_dict` convert to and from plain data. `str(config)` gives YAML.
  - `find_project_file(directory, name)` does the upward search on its own.
- `cobalt.document.Document` holds a page's frontmatter and its body.
  - `Document.parse(text)` splits the page into YAML frontmatter and body. `split_document(text)` does only the split.
  - `str(document)` writes the page back.
- `cobalt.frontmatter.Frontmatter` holds page metadata.
  - `merge(other)` fills the fields that are unset from `other`.
  - `merge_path(relpath)` sets the format, published date, slug and title from a file name such as `2017-03-05-first-post.md`.
- `cobalt.collection` provides `PageCollection`, `PostCollection` and `Collection`.
- `cobalt.pagination.Pagination` holds pagination settings.
- `cobalt.site.Site` holds site settings.
- `cobalt.assets.Assets` holds asset settings.
- `cobalt.paths` provides `slugify`, `titleize_slug`, `split_ext`, `parse_file_stem` and `RelPath`. `RelPath` is a normalised path relative to the project, and absolute paths are rejected.
- `cobalt.source.Source` walks a site directory.
  - It applies gitignore-style ignore patterns.
  - It yields a `SourcePath` for each included file, sorted by name within each directory.
- `cobalt.highlight.Raw` renders fenced code blocks as escaped HTML inside `<pre><code>`. The element gets a `language-…` class when a language is given.
- `cobalt.fileserve` is a minimal static file server for use during development. It provides `Server`, `ServerBuilder` and `ServeError`.

Invalid configuration or frontmatter raises `cobalt.errors.ConfigError`.

## Install

```
pip install .
```

## Example

```python
from cobalt.config import Config
from cobalt.document import Document

config = Config.from_cwd(".")
doc = Document.parse("---\ntitle: Hello\n---\nBody text")
front, content = doc.into_parts()
print(front.title, content)
```

## Serving a directory

```
cobalt-serve
```

This serves the current directory over HTTP on `localhost`. It uses the first free port from 1024 upwards.

- A request for a directory serves that directory's `index.html`.
- A missing file gets a 404 page.
- Query strings are ignored.
- Press Ctrl-C to stop.

From code, use `ServerBuilder(path).hostname(...).port(...).build()` to get a `Server`. `serve()` runs until `close()` is called from another thread.

## What this package does not do

The package reads and models a site but does not build one. It has none of the following:

- rendering of Markdown or templates
- layouts
- RSS, JSON feed or sitemap output
- Sass compilation
- commands to create, rename or publish documents

`Raw` does no syntax highlighting. It has no themes or syntaxes.

## Tests

```
pip install .[test]
pytest
```