HEAD_CLOSE = "</head>"


def has_head_marker(shell: str) -> bool:
    return HEAD_CLOSE in shell


def inject(shell: str, fragment: str) -> str:
    """Insert ``fragment`` right before the first ``</head>`` of ``shell``.

    A shell without the marker is returned unchanged.
    """
    return shell.replace(HEAD_CLOSE, f"{fragment}{HEAD_CLOSE}", 1)
