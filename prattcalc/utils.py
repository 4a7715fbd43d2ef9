import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def caret_diagnostic(header: str, line: str, error_idx: int, context: int | None = None) -> str:
    """Header, the offending line (optionally clipped around the error) and a caret under the error"""
    if context is None:
        return "\n".join([header, line, " " * error_idx + "^"])
    print_start_idx = max(0, error_idx - context)
    print_ellipsis_pre = print_start_idx > 0
    print_end_idx = min(len(line), error_idx + context)
    print_ellipsis_post = print_end_idx < len(line)
    return "\n".join(
        [
            header,
            (
                ("..." if print_ellipsis_pre else "")
                + line[print_start_idx:print_end_idx]
                + ("..." if print_ellipsis_post else "")
            ),
            " " * (error_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
        ]
    )
