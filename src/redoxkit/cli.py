"""Command-line entrypoints for redoxkit."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Annotated, Any, Dict

import typer

from redoxkit.balancer import balance_redox_equation
from redoxkit.electrochemistry import (
    calculate_cell_potential,
    calculate_electrolysis,
    calculate_nernst_equation,
)
from redoxkit.errors import RedoxError
from redoxkit.potentials import cell_potential_from_table, get_all_half_reactions

app = typer.Typer(add_completion=False)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output.")] = False,
) -> None:
    """Redox balancing and electrochemistry calculators."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _run_job(job: Dict[str, Any]) -> Any:
    job_type = (job.get("type") or "").lower()

    if job_type == "balance":
        return balance_redox_equation(
            job["oxidation"], job["reduction"], acidic=bool(job.get("acidic", True))
        )
    elif job_type == "cell":
        n = float(job.get("n", 2))
        if "cathode" in job:
            return cell_potential_from_table(job["cathode"], job["anode"], n)
        return calculate_cell_potential(float(job["cathode_e0"]), float(job["anode_e0"]), n)
    elif job_type == "nernst":
        return calculate_nernst_equation(
            e0=float(job["e0"]),
            n=float(job["n"]),
            q=float(job["q"]),
            temperature=float(job.get("temperature", 298.15)),
        )
    elif job_type == "electrolysis":
        return calculate_electrolysis(
            current=float(job["current"]),
            time=float(job["time"]),
            n=float(job["n"]),
            molar_mass=float(job["molar_mass"]),
            is_gas=bool(job.get("is_gas", False)),
        )
    else:
        raise ValueError(f"Unknown job type: {job_type}")


def _emit(result: Any) -> None:
    typer.echo(json.dumps(asdict(result), indent=2, ensure_ascii=False))


def _fail(error: RedoxError) -> typer.Exit:
    typer.echo(f"Error ({error.kind.value}): {error}", err=True)
    return typer.Exit(code=1)


@app.command()
def balance(
    oxidation: Annotated[str, typer.Argument(help="Oxidation half-reaction, e.g. 'Zn -> Zn2+ + 2e-'.")],
    reduction: Annotated[str, typer.Argument(help="Reduction half-reaction, e.g. 'Cu2+ + 2e- -> Cu'.")],
    basic: Annotated[bool, typer.Option("--basic", help="Rewrite the result for basic solution.")] = False,
) -> None:
    """Balance a redox reaction from two half-reactions."""
    try:
        result = balance_redox_equation(oxidation, reduction, acidic=not basic)
    except RedoxError as error:
        raise _fail(error)
    _emit(result)


@app.command()
def cell(
    cathode_e0: Annotated[float | None, typer.Option(help="Cathode E° (V).")] = None,
    anode_e0: Annotated[float | None, typer.Option(help="Anode E° (V).")] = None,
    cathode: Annotated[str | None, typer.Option(help="Cathode half-cell key, e.g. Cu2+/Cu.")] = None,
    anode: Annotated[str | None, typer.Option(help="Anode half-cell key, e.g. Zn2+/Zn.")] = None,
    n: Annotated[float, typer.Option(help="Electrons transferred.")] = 2,
) -> None:
    """Standard cell potential and ΔG° from two half-cells."""
    if cathode is not None and anode is not None:
        try:
            result = cell_potential_from_table(cathode, anode, n)
        except KeyError as error:
            typer.echo(f"Error: {error.args[0]}", err=True)
            raise typer.Exit(code=1)
    elif cathode_e0 is not None and anode_e0 is not None:
        result = calculate_cell_potential(cathode_e0, anode_e0, n)
    else:
        typer.echo("Give either --cathode/--anode keys or --cathode-e0/--anode-e0 values.", err=True)
        raise typer.Exit(code=2)
    _emit(result)


@app.command()
def nernst(
    e0: Annotated[float, typer.Argument(help="Standard cell potential (V).")],
    n: Annotated[float, typer.Argument(help="Electrons transferred.")],
    q: Annotated[float, typer.Argument(help="Reaction quotient.")],
    temperature: Annotated[float, typer.Option(help="Temperature (K).")] = 298.15,
) -> None:
    """Cell potential at non-standard conditions."""
    try:
        result = calculate_nernst_equation(e0, n, q, temperature)
    except RedoxError as error:
        raise _fail(error)
    _emit(result)


@app.command()
def electrolysis(
    current: Annotated[float, typer.Argument(help="Current (A).")],
    time: Annotated[float, typer.Argument(help="Time (s).")],
    n: Annotated[float, typer.Argument(help="Electrons per formula unit.")],
    molar_mass: Annotated[float, typer.Argument(help="Molar mass (g/mol).")],
    gas: Annotated[bool, typer.Option("--gas", help="Report volume at STP.")] = False,
) -> None:
    """Mass (and gas volume) produced by electrolysis."""
    try:
        result = calculate_electrolysis(current, time, n, molar_mass, is_gas=gas)
    except RedoxError as error:
        raise _fail(error)
    _emit(result)


@app.command()
def potentials() -> None:
    """List standard reduction potentials, highest first."""
    rows = [asdict(entry) for entry in get_all_half_reactions()]
    typer.echo(json.dumps(rows, indent=2, ensure_ascii=False))


@app.command()
def run(
    config_file: Annotated[
        Path, typer.Argument(help="Path to JSON file with a 'jobs' list.")
    ],
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
) -> None:
    """Run a batch of calculations from a config file."""
    with open(config_file, "r", encoding="utf-8") as f:
        config = json.load(f)

    results = []
    for job in config.get("jobs", []):
        try:
            results.append({"type": job.get("type"), "result": asdict(_run_job(job))})
        except RedoxError as error:
            results.append({"type": job.get("type"), "error": {"kind": error.kind.value, "message": str(error)}})
        except (KeyError, ValueError) as error:
            message = error.args[0] if error.args else str(error)
            results.append({"type": job.get("type"), "error": {"kind": type(error).__name__, "message": str(message)}})

    json_output = json.dumps(results, indent=2, ensure_ascii=False)
    typer.echo(json_output)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(json_output)
