"""Extension and special filename to tag mappings.

Every entry in ``EXTENSIONS`` and ``NAMES`` carries exactly one of ``text`` or
``binary``. Entries in ``EXTENSIONS_NEED_BINARY_CHECK`` carry neither, so the
encoding tag is always decided by sniffing the file contents.
"""

from __future__ import annotations

EXTENSIONS: dict[str, frozenset[str]] = {
    "adoc": frozenset({"text", "asciidoc"}),
    "ai": frozenset({"binary", "adobe-illustrator"}),
    "aj": frozenset({"text", "aspectj"}),
    "asciidoc": frozenset({"text", "asciidoc"}),
    "apinotes": frozenset({"text", "apinotes"}),
    "asar": frozenset({"binary", "asar"}),
    "asm": frozenset({"text", "asm"}),
    "astro": frozenset({"text", "astro"}),
    "avif": frozenset({"binary", "image", "avif"}),
    "avsc": frozenset({"text", "avro-schema"}),
    "bash": frozenset({"text", "shell", "bash"}),
    "bat": frozenset({"text", "batch"}),
    "bats": frozenset({"text", "shell", "bash", "bats"}),
    "bazel": frozenset({"text", "bazel"}),
    "bb": frozenset({"text", "bitbake"}),
    "bbappend": frozenset({"text", "bitbake"}),
    "bbclass": frozenset({"text", "bitbake"}),
    "beancount": frozenset({"text", "beancount"}),
    "bib": frozenset({"text", "bib"}),
    "bmp": frozenset({"binary", "image", "bitmap"}),
    "bz2": frozenset({"binary", "bzip2"}),
    "bz3": frozenset({"binary", "bzip3"}),
    "bzl": frozenset({"text", "bazel"}),
    "c": frozenset({"text", "c"}),
    "c++": frozenset({"text", "c++"}),
    "c++m": frozenset({"text", "c++"}),
    "cc": frozenset({"text", "c++"}),
    "ccm": frozenset({"text", "c++"}),
    "cfg": frozenset({"text"}),
    "chs": frozenset({"text", "c2hs"}),
    "cjs": frozenset({"text", "javascript"}),
    "clj": frozenset({"text", "clojure"}),
    "cljc": frozenset({"text", "clojure"}),
    "cljs": frozenset({"text", "clojure", "clojurescript"}),
    "cmake": frozenset({"text", "cmake"}),
    "cnf": frozenset({"text"}),
    "coffee": frozenset({"text", "coffee"}),
    "conf": frozenset({"text"}),
    "cpp": frozenset({"text", "c++"}),
    "cppm": frozenset({"text", "c++"}),
    "cr": frozenset({"text", "crystal"}),
    "crt": frozenset({"text", "pem"}),
    "cs": frozenset({"text", "c#"}),
    "csproj": frozenset({"text", "xml", "csproj", "msbuild"}),
    "csh": frozenset({"text", "shell", "csh"}),
    "cson": frozenset({"text", "cson"}),
    "css": frozenset({"text", "css"}),
    "csv": frozenset({"text", "csv"}),
    "cu": frozenset({"text", "cuda"}),
    "cue": frozenset({"text", "cue"}),
    "cuh": frozenset({"text", "cuda"}),
    "cxx": frozenset({"text", "c++"}),
    "cxxm": frozenset({"text", "c++"}),
    "cylc": frozenset({"text", "cylc"}),
    "dart": frozenset({"text", "dart"}),
    "dbc": frozenset({"text", "dbc"}),
    "def": frozenset({"text", "def"}),
    "diff": frozenset({"text", "diff"}),
    "dll": frozenset({"binary"}),
    "dockerfile": frozenset({"text", "dockerfile"}),
    "dotenv": frozenset({"text", "dotenv"}),
    "dtd": frozenset({"text", "dtd"}),
    "dts": frozenset({"text", "dts"}),
    "dtsi": frozenset({"text", "dts"}),
    "dyalog": frozenset({"text", "dyalog"}),
    "ear": frozenset({"binary", "zip", "jar"}),
    "edn": frozenset({"text", "clojure", "edn"}),
    "ejs": frozenset({"text", "ejs"}),
    "ejson": frozenset({"text", "json", "ejson"}),
    "elm": frozenset({"text", "elm"}),
    "env": frozenset({"text", "dotenv"}),
    "eot": frozenset({"binary", "eot"}),
    "eps": frozenset({"binary", "eps"}),
    "erb": frozenset({"text", "erb"}),
    "erl": frozenset({"text", "erlang"}),
    "ex": frozenset({"text", "elixir"}),
    "exe": frozenset({"binary"}),
    "exs": frozenset({"text", "elixir"}),
    "eyaml": frozenset({"text", "yaml"}),
    "f03": frozenset({"text", "fortran"}),
    "f08": frozenset({"text", "fortran"}),
    "f90": frozenset({"text", "fortran"}),
    "f95": frozenset({"text", "fortran"}),
    "feature": frozenset({"text", "gherkin"}),
    "fish": frozenset({"text", "fish"}),
    "fits": frozenset({"binary", "fits"}),
    "fs": frozenset({"text", "f#"}),
    "fsproj": frozenset({"text", "xml", "fsproj", "msbuild"}),
    "fsx": frozenset({"text", "f#", "f#script"}),
    "gd": frozenset({"text", "gdscript"}),
    "gemspec": frozenset({"text", "ruby"}),
    "geojson": frozenset({"text", "geojson", "json"}),
    "ggb": frozenset({"binary", "zip", "ggb"}),
    "gif": frozenset({"binary", "image", "gif"}),
    "gleam": frozenset({"text", "gleam"}),
    "go": frozenset({"text", "go"}),
    "gotmpl": frozenset({"text", "gotmpl"}),
    "gpx": frozenset({"text", "gpx", "xml"}),
    "graphql": frozenset({"text", "graphql"}),
    "gradle": frozenset({"text", "groovy"}),
    "groovy": frozenset({"text", "groovy"}),
    "gyb": frozenset({"text", "gyb"}),
    "gyp": frozenset({"text", "gyp", "python"}),
    "gypi": frozenset({"text", "gyp", "python"}),
    "gz": frozenset({"binary", "gzip"}),
    "h": frozenset({"text", "header", "c", "c++"}),
    "hbs": frozenset({"text", "handlebars"}),
    "hcl": frozenset({"text", "hcl"}),
    "hh": frozenset({"text", "header", "c++"}),
    "hpp": frozenset({"text", "header", "c++"}),
    "hrl": frozenset({"text", "erlang"}),
    "hs": frozenset({"text", "haskell"}),
    "htm": frozenset({"text", "html"}),
    "html": frozenset({"text", "html"}),
    "hxx": frozenset({"text", "header", "c++"}),
    "icns": frozenset({"binary", "icns"}),
    "ico": frozenset({"binary", "icon"}),
    "ics": frozenset({"text", "icalendar"}),
    "idl": frozenset({"text", "idl"}),
    "idr": frozenset({"text", "idris"}),
    "inc": frozenset({"text", "inc"}),
    "ini": frozenset({"text", "ini"}),
    "inl": frozenset({"text", "inl", "c++"}),
    "ino": frozenset({"text", "ino", "c++"}),
    "inx": frozenset({"text", "xml", "inx"}),
    "ipynb": frozenset({"text", "jupyter", "json"}),
    "ixx": frozenset({"text", "c++"}),
    "j2": frozenset({"text", "jinja"}),
    "jade": frozenset({"text", "jade"}),
    "jar": frozenset({"binary", "zip", "jar"}),
    "java": frozenset({"text", "java"}),
    "jenkins": frozenset({"text", "groovy", "jenkins"}),
    "jenkinsfile": frozenset({"text", "groovy", "jenkins"}),
    "jinja": frozenset({"text", "jinja"}),
    "jinja2": frozenset({"text", "jinja"}),
    "jl": frozenset({"text", "julia"}),
    "jpeg": frozenset({"binary", "image", "jpeg"}),
    "jpg": frozenset({"binary", "image", "jpeg"}),
    "js": frozenset({"text", "javascript"}),
    "json": frozenset({"text", "json"}),
    "json5": frozenset({"text", "json5"}),
    "jsonld": frozenset({"text", "json", "jsonld"}),
    "jsonnet": frozenset({"text", "jsonnet"}),
    "jsx": frozenset({"text", "jsx"}),
    "key": frozenset({"text", "pem"}),
    "kml": frozenset({"text", "kml", "xml"}),
    "kt": frozenset({"text", "kotlin"}),
    "kts": frozenset({"text", "kotlin"}),
    "lean": frozenset({"text", "lean"}),
    "lektorproject": frozenset({"text", "ini", "lektorproject"}),
    "less": frozenset({"text", "less"}),
    "lfm": frozenset({"text", "lazarus", "lazarus-form"}),
    "lhs": frozenset({"text", "literate-haskell"}),
    "libsonnet": frozenset({"text", "jsonnet"}),
    "lidr": frozenset({"text", "idris"}),
    "liquid": frozenset({"text", "liquid"}),
    "lpi": frozenset({"text", "lazarus", "xml"}),
    "lpr": frozenset({"text", "lazarus", "pascal"}),
    "lr": frozenset({"text", "lektor"}),
    "lua": frozenset({"text", "lua"}),
    "m": frozenset({"text", "objective-c"}),
    "m4": frozenset({"text", "m4"}),
    "magik": frozenset({"text", "magik"}),
    "make": frozenset({"text", "makefile"}),
    "manifest": frozenset({"text", "manifest"}),
    "map": frozenset({"text", "map"}),
    "markdown": frozenset({"text", "markdown"}),
    "md": frozenset({"text", "markdown"}),
    "mdx": frozenset({"text", "mdx"}),
    "meson": frozenset({"text", "meson"}),
    "mib": frozenset({"text", "mib"}),
    "mjs": frozenset({"text", "javascript"}),
    "mk": frozenset({"text", "makefile"}),
    "ml": frozenset({"text", "ocaml"}),
    "mli": frozenset({"text", "ocaml"}),
    "mm": frozenset({"text", "c++", "objective-c++"}),
    "modulemap": frozenset({"text", "modulemap"}),
    "mojo": frozenset({"text", "mojo"}),
    "mscx": frozenset({"text", "xml", "musescore"}),
    "mscz": frozenset({"binary", "zip", "musescore"}),
    "mustache": frozenset({"text", "mustache"}),
    "myst": frozenset({"text", "myst"}),
    "ngdoc": frozenset({"text", "ngdoc"}),
    "nim": frozenset({"text", "nim"}),
    "nimble": frozenset({"text", "nimble"}),
    "nims": frozenset({"text", "nim"}),
    "nix": frozenset({"text", "nix"}),
    "njk": frozenset({"text", "nunjucks"}),
    "otf": frozenset({"binary", "otf"}),
    "p12": frozenset({"binary", "p12"}),
    "pas": frozenset({"text", "pascal"}),
    "patch": frozenset({"text", "diff"}),
    "pdf": frozenset({"binary", "pdf"}),
    "pem": frozenset({"text", "pem"}),
    "php": frozenset({"text", "php"}),
    "php4": frozenset({"text", "php"}),
    "php5": frozenset({"text", "php"}),
    "phtml": frozenset({"text", "php"}),
    "pl": frozenset({"text", "perl"}),
    "plantuml": frozenset({"text", "plantuml"}),
    "pm": frozenset({"text", "perl"}),
    "png": frozenset({"binary", "image", "png"}),
    "po": frozenset({"text", "pofile"}),
    "pom": frozenset({"pom", "text", "xml"}),
    "pp": frozenset({"text", "puppet"}),
    "prisma": frozenset({"text", "prisma"}),
    "properties": frozenset({"text", "java-properties"}),
    "props": frozenset({"text", "xml", "msbuild"}),
    "proto": frozenset({"text", "proto"}),
    "ps1": frozenset({"text", "powershell"}),
    "psd1": frozenset({"text", "powershell"}),
    "psm1": frozenset({"text", "powershell"}),
    "pug": frozenset({"text", "pug"}),
    "puml": frozenset({"text", "plantuml"}),
    "purs": frozenset({"text", "purescript"}),
    "pxd": frozenset({"text", "cython"}),
    "pxi": frozenset({"text", "cython"}),
    "py": frozenset({"text", "python"}),
    "pyi": frozenset({"text", "pyi"}),
    "pyproj": frozenset({"text", "xml", "pyproj", "msbuild"}),
    "pyt": frozenset({"text", "python"}),
    "pyx": frozenset({"text", "cython"}),
    "pyz": frozenset({"binary", "pyz"}),
    "pyzw": frozenset({"binary", "pyz"}),
    "qml": frozenset({"text", "qml"}),
    "r": frozenset({"text", "r"}),
    "rake": frozenset({"text", "ruby"}),
    "rb": frozenset({"text", "ruby"}),
    "resx": frozenset({"text", "resx", "xml"}),
    "rng": frozenset({"text", "xml", "relax-ng"}),
    "rs": frozenset({"text", "rust"}),
    "rst": frozenset({"text", "rst"}),
    "s": frozenset({"text", "asm"}),
    "sas": frozenset({"text", "sas"}),
    "sass": frozenset({"text", "sass"}),
    "sbt": frozenset({"text", "sbt", "scala"}),
    "sc": frozenset({"text", "scala"}),
    "scala": frozenset({"text", "scala"}),
    "scm": frozenset({"text", "scheme"}),
    "scss": frozenset({"text", "scss"}),
    "sh": frozenset({"text", "shell"}),
    "sln": frozenset({"text", "sln"}),
    "sls": frozenset({"text", "salt"}),
    "so": frozenset({"binary"}),
    "sol": frozenset({"text", "solidity"}),
    "spec": frozenset({"text", "spec"}),
    "sql": frozenset({"text", "sql"}),
    "ss": frozenset({"text", "scheme"}),
    "sty": frozenset({"text", "tex"}),
    "styl": frozenset({"text", "stylus"}),
    "sv": frozenset({"text", "system-verilog"}),
    "svelte": frozenset({"text", "svelte"}),
    "svg": frozenset({"text", "image", "svg", "xml"}),
    "svh": frozenset({"text", "system-verilog"}),
    "swf": frozenset({"binary", "swf"}),
    "swift": frozenset({"text", "swift"}),
    "swiftdeps": frozenset({"text", "swiftdeps"}),
    "tac": frozenset({"text", "twisted", "python"}),
    "tar": frozenset({"binary", "tar"}),
    "targets": frozenset({"text", "xml", "msbuild"}),
    "templ": frozenset({"text", "templ"}),
    "tex": frozenset({"text", "tex"}),
    "textproto": frozenset({"text", "textproto"}),
    "tf": frozenset({"text", "terraform"}),
    "tfvars": frozenset({"text", "terraform"}),
    "tgz": frozenset({"binary", "gzip"}),
    "thrift": frozenset({"text", "thrift"}),
    "tiff": frozenset({"binary", "image", "tiff"}),
    "toml": frozenset({"text", "toml"}),
    "ts": frozenset({"text", "ts"}),
    "tsv": frozenset({"text", "tsv"}),
    "tsx": frozenset({"text", "tsx"}),
    "ttf": frozenset({"binary", "ttf"}),
    "twig": frozenset({"text", "twig"}),
    "txsprofile": frozenset({"text", "ini", "txsprofile"}),
    "txt": frozenset({"text", "plain-text"}),
    "txtpb": frozenset({"text", "textproto"}),
    "urdf": frozenset({"text", "xml", "urdf"}),
    "v": frozenset({"text", "verilog"}),
    "vb": frozenset({"text", "vb"}),
    "vbproj": frozenset({"text", "xml", "vbproj", "msbuild"}),
    "vcxproj": frozenset({"text", "xml", "vcxproj", "msbuild"}),
    "vdx": frozenset({"text", "vdx"}),
    "vh": frozenset({"text", "verilog"}),
    "vhd": frozenset({"text", "vhdl"}),
    "vim": frozenset({"text", "vim"}),
    "vtl": frozenset({"text", "vtl"}),
    "vue": frozenset({"text", "vue"}),
    "war": frozenset({"binary", "zip", "jar"}),
    "wav": frozenset({"binary", "audio", "wav"}),
    "webp": frozenset({"binary", "image", "webp"}),
    "whl": frozenset({"binary", "wheel", "zip"}),
    "wkt": frozenset({"text", "wkt"}),
    "woff": frozenset({"binary", "woff"}),
    "woff2": frozenset({"binary", "woff2"}),
    "wsdl": frozenset({"text", "xml", "wsdl"}),
    "wsgi": frozenset({"text", "wsgi", "python"}),
    "xhtml": frozenset({"text", "xml", "html", "xhtml"}),
    "xacro": frozenset({"text", "xml", "urdf", "xacro"}),
    "xctestplan": frozenset({"text", "json"}),
    "xml": frozenset({"text", "xml"}),
    "xq": frozenset({"text", "xquery"}),
    "xql": frozenset({"text", "xquery"}),
    "xqm": frozenset({"text", "xquery"}),
    "xqu": frozenset({"text", "xquery"}),
    "xquery": frozenset({"text", "xquery"}),
    "xqy": frozenset({"text", "xquery"}),
    "xsd": frozenset({"text", "xml", "xsd"}),
    "xsl": frozenset({"text", "xml", "xsl"}),
    "xslt": frozenset({"text", "xml", "xsl"}),
    "yaml": frozenset({"text", "yaml"}),
    "yamlld": frozenset({"text", "yaml", "yamlld"}),
    "yang": frozenset({"text", "yang"}),
    "yin": frozenset({"text", "xml", "yin"}),
    "yml": frozenset({"text", "yaml"}),
    "zcml": frozenset({"text", "xml", "zcml"}),
    "zig": frozenset({"text", "zig"}),
    "zip": frozenset({"binary", "zip"}),
    "zpt": frozenset({"text", "zpt"}),
    "zsh": frozenset({"text", "shell", "zsh"}),
}

EXTENSIONS_NEED_BINARY_CHECK: dict[str, frozenset[str]] = {
    "plist": frozenset({"plist"}),
    "ppm": frozenset({"image", "ppm"}),
}

NAMES: dict[str, frozenset[str]] = {
    ".ansible-lint": EXTENSIONS["yaml"],
    ".babelrc": EXTENSIONS["json"] | {"babelrc"},
    ".bash_aliases": EXTENSIONS["bash"],
    ".bash_profile": EXTENSIONS["bash"],
    ".bashrc": EXTENSIONS["bash"],
    ".bazelrc": frozenset({"text", "bazelrc"}),
    ".bowerrc": EXTENSIONS["json"] | {"bowerrc"},
    ".browserslistrc": frozenset({"text", "browserslistrc"}),
    ".clang-format": EXTENSIONS["yaml"],
    ".clang-tidy": EXTENSIONS["yaml"],
    ".codespellrc": EXTENSIONS["ini"] | {"codespellrc"},
    ".coveragerc": EXTENSIONS["ini"] | {"coveragerc"},
    ".cshrc": EXTENSIONS["csh"],
    ".csslintrc": EXTENSIONS["json"] | {"csslintrc"},
    ".dockerignore": frozenset({"text", "dockerignore"}),
    ".editorconfig": frozenset({"text", "editorconfig"}),
    ".envrc": EXTENSIONS["bash"],
    ".flake8": EXTENSIONS["ini"] | {"flake8"},
    ".gitattributes": frozenset({"text", "gitattributes"}),
    ".gitconfig": EXTENSIONS["ini"] | {"gitconfig"},
    ".gitignore": frozenset({"text", "gitignore"}),
    ".gitlint": EXTENSIONS["ini"] | {"gitlint"},
    ".gitmodules": frozenset({"text", "gitmodules"}),
    ".hgrc": EXTENSIONS["ini"] | {"hgrc"},
    ".isort.cfg": EXTENSIONS["ini"] | {"isort"},
    ".jshintrc": EXTENSIONS["json"] | {"jshintrc"},
    ".mailmap": frozenset({"text", "mailmap"}),
    ".mention-bot": EXTENSIONS["json"] | {"mention-bot"},
    ".npmignore": frozenset({"text", "npmignore"}),
    ".pdbrc": EXTENSIONS["py"] | {"pdbrc"},
    ".prettierignore": frozenset({"text", "gitignore", "prettierignore"}),
    ".pypirc": EXTENSIONS["ini"] | {"pypirc"},
    ".rstcheck.cfg": EXTENSIONS["ini"],
    ".salt-lint": EXTENSIONS["yaml"] | {"salt-lint"},
    ".yamllint": EXTENSIONS["yaml"] | {"yamllint"},
    ".zlogin": EXTENSIONS["zsh"],
    ".zlogout": EXTENSIONS["zsh"],
    ".zprofile": EXTENSIONS["zsh"],
    ".zshrc": EXTENSIONS["zsh"],
    ".zshenv": EXTENSIONS["zsh"],
    "AUTHORS": EXTENSIONS["txt"],
    "BUILD": EXTENSIONS["bzl"],
    "Cargo.toml": EXTENSIONS["toml"] | {"cargo"},
    "Cargo.lock": EXTENSIONS["toml"] | {"cargo-lock"},
    "CMakeLists.txt": EXTENSIONS["cmake"],
    "CHANGELOG": EXTENSIONS["txt"],
    "config.ru": EXTENSIONS["rb"],
    "Containerfile": frozenset({"text", "dockerfile"}),
    "CONTRIBUTING": EXTENSIONS["txt"],
    "copy.bara.sky": EXTENSIONS["bzl"],
    "COPYING": EXTENSIONS["txt"],
    "Dockerfile": frozenset({"text", "dockerfile"}),
    "Gemfile": EXTENSIONS["rb"],
    "Gemfile.lock": frozenset({"text"}),
    "GNUmakefile": EXTENSIONS["mk"],
    "go.mod": frozenset({"text", "go-mod"}),
    "go.sum": frozenset({"text", "go-sum"}),
    "Jakefile": EXTENSIONS["js"],
    "Jenkinsfile": EXTENSIONS["jenkins"],
    "LICENSE": EXTENSIONS["txt"],
    "MAINTAINERS": EXTENSIONS["txt"],
    "Makefile": EXTENSIONS["mk"],
    "meson.build": EXTENSIONS["meson"],
    "meson_options.txt": EXTENSIONS["meson"] | {"meson-options"},
    "makefile": EXTENSIONS["mk"],
    "NEWS": EXTENSIONS["txt"],
    "NOTICE": EXTENSIONS["txt"],
    "PATENTS": EXTENSIONS["txt"],
    "Pipfile": EXTENSIONS["toml"],
    "Pipfile.lock": EXTENSIONS["json"],
    "PKGBUILD": frozenset({"text", "bash", "pkgbuild", "alpm"}),
    "poetry.lock": EXTENSIONS["toml"],
    "pom.xml": EXTENSIONS["pom"],
    "pylintrc": EXTENSIONS["ini"] | {"pylintrc"},
    "README": EXTENSIONS["txt"],
    "Rakefile": EXTENSIONS["rb"],
    "rebar.config": EXTENSIONS["erl"],
    "setup.cfg": EXTENSIONS["ini"],
    "sys.config": EXTENSIONS["erl"],
    "sys.config.src": EXTENSIONS["erl"],
    "Tiltfile": frozenset({"text", "tiltfile"}),
    "Vagrantfile": EXTENSIONS["rb"],
    "WORKSPACE": EXTENSIONS["bzl"],
    "wscript": EXTENSIONS["py"],
}

__all__ = ["EXTENSIONS", "EXTENSIONS_NEED_BINARY_CHECK", "NAMES"]
