"""Yes/no questions on the terminal."""

NEGATIVE_ANSWERS = ("n", "no")


def is_declined(answer) -> bool:
    """Only an explicit "n"/"no" declines; anything else keeps the default yes."""
    if answer is None:
        return False
    return answer.strip().lower() in NEGATIVE_ANSWERS


def ask_yes_no(question, log_callback=None, input_func=input):
    """Ask a [Y/n] question, defaulting to yes on empty input or EOF.

    Args:
        question: Text shown before the [Y/n] suffix
        log_callback: Optional log callback used to print the question as a warning
        input_func: Callable reading one line (input() by default)

    Returns:
        bool: False only when the answer was "n" or "no"
    """
    text = f"{question} [Y/n]: "
    if log_callback:
        log_callback(text, warning=True, end="")
        text = ""
    try:
        answer = input_func(text)
    except EOFError:
        answer = ""
    return not is_declined(answer)
