"""String and character natives."""

from __future__ import annotations

from io import StringIO

from ssli import LispValue, SExpression
from ssli.builtin.args import eval_nth, require
from ssli.errors import SsliTypeError
from ssli.evaluation.evaluator import eval_args
from ssli.types.environment import Environment
from ssli.types.value import as_int, as_list, as_string


def _str_arg(env: Environment, args: list[SExpression], i: int, name: str) -> str:
    return as_string(eval_nth(args, i, env, name))


def format_values(template: str, values: list[str]) -> str:
    """Substitute `%v` placeholders in order; `%%` is a literal percent.

    Placeholders beyond the supplied values are kept as `%v`, surplus values
    are ignored, and a `%` followed by anything else is kept.
    """
    with StringIO() as out:
        index = 0
        i = 0
        n = len(template)
        while i < n:
            ch = template[i]
            if ch == "%" and i + 1 < n:
                nxt = template[i + 1]
                if nxt == "%":
                    out.write("%")
                    i += 2
                    continue
                if nxt == "v":
                    if index < len(values):
                        out.write(values[index])
                        index += 1
                    else:
                        out.write("%v")
                    i += 2
                    continue
            out.write(ch)
            i += 1
        return out.getvalue()


def strings_format(env: Environment, args: list[SExpression]) -> LispValue:
    require(args, 1, "str.format")
    parts = [as_string(v) for v in eval_args(args, env)]
    return format_values(parts[0], parts[1:])


def strings_trim(env: Environment, args: list[SExpression]) -> LispValue:
    return _str_arg(env, args, 0, "str.trim").strip()


def strings_trim_left(env: Environment, args: list[SExpression]) -> LispValue:
    return _str_arg(env, args, 0, "str.trim_left").lstrip()


def strings_trim_right(env: Environment, args: list[SExpression]) -> LispValue:
    return _str_arg(env, args, 0, "str.trim_right").rstrip()


def strings_to_lower(env: Environment, args: list[SExpression]) -> LispValue:
    return _str_arg(env, args, 0, "str.to_lower").lower()


def strings_to_upper(env: Environment, args: list[SExpression]) -> LispValue:
    return _str_arg(env, args, 0, "str.to_upper").upper()


def strings_split(env: Environment, args: list[SExpression]) -> LispValue:
    text = _str_arg(env, args, 0, "str.split")
    if len(args) == 1:
        return text.split()
    sep = _str_arg(env, args, 1, "str.split")
    if not sep:
        raise SsliTypeError("str.split separator must not be empty")
    return text.split(sep)


def strings_join(env: Environment, args: list[SExpression]) -> LispValue:
    items = as_list(eval_nth(args, 0, env, "str.join"))
    sep = _str_arg(env, args, 1, "str.join")
    return sep.join(as_string(x) for x in items)


def strings_contains(env: Environment, args: list[SExpression]) -> LispValue:
    return _str_arg(env, args, 1, "str.contains") in _str_arg(env, args, 0, "str.contains")


def strings_starts_with(env: Environment, args: list[SExpression]) -> LispValue:
    text = _str_arg(env, args, 0, "str.starts_with")
    return text.startswith(_str_arg(env, args, 1, "str.starts_with"))


def strings_ends_with(env: Environment, args: list[SExpression]) -> LispValue:
    text = _str_arg(env, args, 0, "str.ends_with")
    return text.endswith(_str_arg(env, args, 1, "str.ends_with"))


def strings_replace(env: Environment, args: list[SExpression]) -> LispValue:
    text = _str_arg(env, args, 0, "str.replace")
    old = _str_arg(env, args, 1, "str.replace")
    new = _str_arg(env, args, 2, "str.replace")
    return text.replace(old, new)


def strings_len(env: Environment, args: list[SExpression]) -> LispValue:
    # byte length of the UTF-8 encoding
    return len(_str_arg(env, args, 0, "str.len").encode("utf-8"))


def char_ord(env: Environment, args: list[SExpression]) -> LispValue:
    text = _str_arg(env, args, 0, "char.ord")
    if not text:
        raise SsliTypeError("char.ord requires a non-empty string")
    return ord(text[0])


def char_chr(env: Environment, args: list[SExpression]) -> LispValue:
    code = as_int(eval_nth(args, 0, env, "char.chr"))
    try:
        return chr(code)
    except (ValueError, OverflowError):
        raise SsliTypeError(f"char.chr: {code} is not a valid code point") from None


def register(env: Environment) -> None:
    env.add_native("str.trim", strings_trim)
    env.add_native("str.trim_left", strings_trim_left)
    env.add_native("str.trim_right", strings_trim_right)
    env.add_native("str.to_lower", strings_to_lower)
    env.add_native("str.to_upper", strings_to_upper)
    env.add_native("str.format", strings_format)
    env.add_native("str.split", strings_split)
    env.add_native("str.join", strings_join)
    env.add_native("str.contains", strings_contains)
    env.add_native("str.starts_with", strings_starts_with)
    env.add_native("str.ends_with", strings_ends_with)
    env.add_native("str.replace", strings_replace)
    env.add_native("str.len", strings_len)
    env.add_native("char.ord", char_ord)
    env.add_native("char.chr", char_chr)
