import json
import re
from typing import Dict, List

import click

from .calc_types import (
    Action,
    ActionKind,
    AngleMode,
    BinaryOperator,
    Constant,
    MemoryAction,
    UnaryFunction,
)
from .config import CalculatorSettings, configure_logging
from .engine import CalculatorEngine

NUMBER_RE = re.compile(r"^(\d+\.?\d*|\.\d+)$")

TOKENS: Dict[str, Action] = {
    "=": Action.simple(ActionKind.EVALUATE),
    "(": Action.simple(ActionKind.OPEN_GROUP),
    ")": Action.simple(ActionKind.CLOSE_GROUP),
    "C": Action.simple(ActionKind.CLEAR),
    "clear": Action.simple(ActionKind.CLEAR),
    "back": Action.simple(ActionKind.BACKSPACE),
    "rad": Action.simple(ActionKind.TOGGLE_ANGLE),
    "^": Action.operator(BinaryOperator.POWER),
    "MC": Action.memory(MemoryAction.CLEAR),
    "M+": Action.memory(MemoryAction.ADD),
    "M-": Action.memory(MemoryAction.SUBTRACT),
    "MR": Action.memory(MemoryAction.RECALL),
}
TOKENS.update({op.value: Action.operator(op) for op in BinaryOperator})
TOKENS.update({fn.value: Action.unary(fn) for fn in UnaryFunction})
TOKENS.update({m.value: Action.memory(m) for m in MemoryAction})
# constants win over the unary "rand"
TOKENS.update({c.value: Action.constant(c) for c in Constant})


def parse_script(script: str) -> List[List[Action]]:
    """Split a script into tokens, each expanded to the actions it stands for."""
    out: List[List[Action]] = []
    for token in script.split():
        if NUMBER_RE.match(token):
            out.append([Action.digit(ch) for ch in token])
        elif token in TOKENS:
            out.append([TOKENS[token]])
        else:
            raise click.BadParameter(f"Unknown token: {token}", param_hint="SCRIPT")
    return out


@click.command()
@click.argument("script")
@click.option("--radians", is_flag=True, default=False, help="Start in radian mode")
@click.option("--trace", is_flag=True, default=False, help="Print the display after every token")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the final state as JSON")
@click.option("--verbose", is_flag=True, default=False, help="Log every dispatched action")
def main(script: str, radians: bool, trace: bool, as_json: bool, verbose: bool) -> None:
    """Run a calculator key SCRIPT such as "2 + ( 3 + 4 ) =" and print the display."""
    settings = CalculatorSettings.from_env()
    if radians:
        settings.default_angle_mode = AngleMode.RADIANS
    configure_logging("DEBUG" if verbose else settings.log_level)

    engine = CalculatorEngine(settings)
    for token, actions in zip(script.split(), parse_script(script)):
        state = engine.run(actions)
        if trace:
            click.echo(f"{token}\t{state.display}\t{state.history}")

    state = engine.state()
    if as_json:
        click.echo(json.dumps(state.to_dict()))
    elif not trace:
        click.echo(state.display)


if __name__ == "__main__":  # pragma: no cover
    main()
