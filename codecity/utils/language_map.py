"""File extension to language name and colour lookup used when input files omit them."""
from typing import Dict, Tuple

OTHER_LANGUAGE = 'Other'
OTHER_COLOR = '#8b8b8b'

LANGUAGE_MAP: Dict[str, Tuple[str, str]] = {
    # JavaScript / TypeScript
    '.js': ('JavaScript', '#f0db4f'),
    '.jsx': ('React JSX', '#61dafb'),
    '.ts': ('TypeScript', '#3178c6'),
    '.tsx': ('React TSX', '#61dafb'),
    '.mjs': ('JavaScript', '#f0db4f'),
    '.cjs': ('JavaScript', '#f0db4f'),

    # Web
    '.html': ('HTML', '#e34c26'),
    '.htm': ('HTML', '#e34c26'),
    '.css': ('CSS', '#264de4'),
    '.scss': ('SCSS', '#cd6799'),
    '.sass': ('Sass', '#cd6799'),
    '.less': ('Less', '#1d365d'),
    '.vue': ('Vue', '#42b883'),
    '.svelte': ('Svelte', '#ff3e00'),

    # Python
    '.py': ('Python', '#3776ab'),
    '.pyx': ('Cython', '#3776ab'),
    '.pyi': ('Python Stub', '#3776ab'),

    # JVM
    '.java': ('Java', '#b07219'),
    '.kt': ('Kotlin', '#A97BFF'),
    '.kts': ('Kotlin Script', '#A97BFF'),
    '.scala': ('Scala', '#c22d40'),
    '.groovy': ('Groovy', '#4298b8'),
    '.clj': ('Clojure', '#db5855'),

    # C family
    '.c': ('C', '#555555'),
    '.h': ('C Header', '#555555'),
    '.cpp': ('C++', '#f34b7d'),
    '.cc': ('C++', '#f34b7d'),
    '.hpp': ('C++ Header', '#f34b7d'),
    '.cs': ('C#', '#178600'),

    # Systems
    '.rs': ('Rust', '#dea584'),
    '.go': ('Go', '#00ADD8'),
    '.swift': ('Swift', '#F05138'),
    '.m': ('Objective-C', '#438eff'),

    # Scripting
    '.rb': ('Ruby', '#CC342D'),
    '.php': ('PHP', '#4F5D95'),
    '.pl': ('Perl', '#0298c3'),
    '.lua': ('Lua', '#000080'),
    '.sh': ('Shell', '#89e051'),
    '.bash': ('Bash', '#89e051'),
    '.zsh': ('Zsh', '#89e051'),
    '.fish': ('Fish', '#89e051'),
    '.ps1': ('PowerShell', '#012456'),

    # Data and config
    '.json': ('JSON', '#a0a0a0'),
    '.yaml': ('YAML', '#cb171e'),
    '.yml': ('YAML', '#cb171e'),
    '.toml': ('TOML', '#9c4221'),
    '.xml': ('XML', '#0060ac'),
    '.ini': ('INI', '#a0a0a0'),
    '.env': ('Env', '#a0a0a0'),

    # Docs
    '.md': ('Markdown', '#083fa1'),
    '.mdx': ('MDX', '#083fa1'),
    '.rst': ('reStructuredText', '#141414'),
    '.tex': ('LaTeX', '#3D6117'),
    '.txt': ('Text', '#a0a0a0'),

    # Database
    '.sql': ('SQL', '#e38c00'),
    '.prisma': ('Prisma', '#2D3748'),
    '.graphql': ('GraphQL', '#e535ab'),
    '.gql': ('GraphQL', '#e535ab'),

    # DevOps
    '.dockerfile': ('Dockerfile', '#384d54'),
    '.tf': ('Terraform', '#5C4EE5'),
    '.hcl': ('HCL', '#5C4EE5'),

    # Other
    '.r': ('R', '#198CE7'),
    '.dart': ('Dart', '#00B4AB'),
    '.ex': ('Elixir', '#6e4a7e'),
    '.exs': ('Elixir', '#6e4a7e'),
    '.erl': ('Erlang', '#B83998'),
    '.hs': ('Haskell', '#5e5086'),
    '.elm': ('Elm', '#60B5CC'),
    '.wasm': ('WebAssembly', '#654FF0'),
    '.zig': ('Zig', '#ec915c'),
    '.nim': ('Nim', '#ffc200'),
    '.v': ('V', '#5D87BF'),
}

# Files recognised by their whole name rather than an extension.
SPECIAL_FILES: Dict[str, Tuple[str, str]] = {
    'dockerfile': LANGUAGE_MAP['.dockerfile'],
    'makefile': ('Makefile', '#427819'),
    'cmakelists.txt': ('CMake', '#064F8C'),
}


def get_language_info(path: str) -> Tuple[str, str]:
    """Look up the language name and colour of a file.

    Args:
        path: File path or bare file name; matching is case-insensitive.

    Returns:
        A (language, color) pair, ``('Other', '#8b8b8b')`` for unknown files.
    """
    basename = path.rsplit('/', 1)[-1].lower()
    if basename in SPECIAL_FILES:
        return SPECIAL_FILES[basename]
    if '.' not in basename:
        return OTHER_LANGUAGE, OTHER_COLOR
    return LANGUAGE_MAP.get(basename[basename.rindex('.'):], (OTHER_LANGUAGE, OTHER_COLOR))
