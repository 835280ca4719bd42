_FILETYPE_ALIASES = {
    "c#": "csharp",
    "cs": "csharp",
    "c++": "cpp",
    "golang": "go",
    "js": "javascript",
    "md": "markdown",
    "py": "python",
    "rb": "ruby",
    "rs": "rust",
    "ts": "typescript",
    "typescriptreact": "tsx",
    "javascriptreact": "javascript",
    "yml": "yaml",
    "sh": "shell",
    "bash": "shell",
    "zsh": "shell",
}

_LANGUAGE_DEFAULT_EXTENSIONS = {
    "c": ".c",
    "cpp": ".cpp",
    "csharp": ".cs",
    "css": ".css",
    "go": ".go",
    "html": ".html",
    "java": ".java",
    "javascript": ".js",
    "json": ".json",
    "lua": ".lua",
    "markdown": ".md",
    "python": ".py",
    "ruby": ".rb",
    "rust": ".rs",
    "shell": ".sh",
    "toml": ".toml",
    "tsx": ".tsx",
    "typescript": ".ts",
    "vim": ".vim",
    "yaml": ".yml",
}

PLAINTEXT = "plaintext"


def normalize_filetype(filetype: str) -> str:
    normalized = filetype.strip().lower()
    return _FILETYPE_ALIASES.get(normalized, normalized)


def language_id_for(filetype: str) -> str:
    """Return the languageId sent with didOpen; the raw filetype or ``plaintext``."""
    return filetype if filetype else PLAINTEXT


def extension_for(filetype: str) -> str:
    """Return the file extension used to name an unsaved buffer of *filetype*.

    Known languages map to their canonical extension, other filetypes are used
    verbatim and an empty filetype falls back to ``.txt``.
    """
    if not filetype:
        return ".txt"
    resolved = normalize_filetype(filetype)
    return _LANGUAGE_DEFAULT_EXTENSIONS.get(resolved, f".{filetype}")
