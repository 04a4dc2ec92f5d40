"""One rendering rule per catalog template; each module exposes ``render``."""
