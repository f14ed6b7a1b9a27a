"""Command-line interface for gender-condition."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gender_condition.conditions import ConditionFactory, default_factory
from gender_condition.config import Settings
from gender_condition.customer import Customer, CustomerFacade
from gender_condition.errors import ConditionError
from gender_condition.i18n import CatalogTranslator

app = typer.Typer(
    name="gender-condition",
    help="Customer gender and title conditions for promotion rules",
    no_args_is_help=True,
)
console = Console()

# Sub-command groups
conditions_app = typer.Typer(help="Inspect, check and render conditions")

app.add_typer(conditions_app, name="conditions")

EXAMPLE_CONDITIONS = """# Gender Condition Configuration
# Each entry is a condition as the rule engine stores it

conditions:
  - condition_service_id: thelia.condition.match_for_gender
    operators:
      gender: "=="
    values:
      gender: man

  - condition_service_id: thelia.condition.match_for_title
    operators:
      title: "=="
    values:
      title: 1
"""


def get_settings() -> Settings:
    """Load application settings."""
    return Settings()


def get_factory(settings: Settings, title_id: int | None = None) -> ConditionFactory:
    """Factory wired to the configured translations and an optional customer."""
    translator = CatalogTranslator.for_locale(settings.locale, settings.translations_dir)
    customer = Customer(title_id=title_id) if title_id is not None else None
    return default_factory(CustomerFacade(customer), translator)


@app.command()
def version() -> None:
    """Show version information."""
    from gender_condition import __version__

    console.print(f"gender-condition v{__version__}")


@app.command()
def init(
    config_dir: Annotated[
        Path | None,
        typer.Option("--config-dir", "-c", help="Configuration directory"),
    ] = None,
) -> None:
    """Initialize configuration directory with an example conditions file."""
    settings = get_settings()
    if config_dir:
        settings.config_dir = config_dir

    settings.ensure_config_dir()

    if not settings.conditions_path.exists():
        settings.conditions_path.write_text(EXAMPLE_CONDITIONS)
        console.print(f"[green]Created[/green] {settings.conditions_path}")

    console.print(f"\n[bold]Configuration initialized at:[/bold] {settings.config_dir}")


# === Conditions Commands ===


@conditions_app.command("list")
def conditions_list() -> None:
    """List all registered conditions."""
    factory = get_factory(get_settings())

    table = Table(title="Registered Conditions")
    table.add_column("Service id", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Input", width=8)
    table.add_column("Operators", width=10)
    table.add_column("Tooltip", style="dim")

    for service_id in factory.service_ids():
        condition = factory.create(service_id)
        inputs = condition.generate_inputs()[condition.input_name]
        table.add_row(
            service_id,
            condition.get_name(),
            condition.input_name,
            " ".join(inputs["available_operators"]),
            condition.get_tool_tip(),
        )

    console.print(table)


@conditions_app.command("check")
def conditions_check(
    service_id: Annotated[str, typer.Argument(help="Condition service id")],
    value: Annotated[str, typer.Option("--value", "-v", help="Value to match")],
    title_id: Annotated[int, typer.Option("--title-id", "-t", help="Customer title id")],
    operator: Annotated[str, typer.Option("--operator", "-o", help="Comparison operator")] = "==",
) -> None:
    """Configure one condition and check it against a customer title."""
    factory = get_factory(get_settings(), title_id)

    try:
        condition = factory.create(service_id).set_validators(operator, value)
        matched = condition.is_matching()
    except ConditionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(condition.get_summary(), markup=False)
    if matched:
        console.print(f"[green]Match[/green] for title id {title_id}")
    else:
        console.print(f"[yellow]No match[/yellow] for title id {title_id}")


@conditions_app.command("evaluate")
def conditions_evaluate(
    title_id: Annotated[int, typer.Option("--title-id", "-t", help="Customer title id")],
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Conditions file (default from settings)"),
    ] = None,
) -> None:
    """Evaluate every stored condition against a customer title."""
    from gender_condition.config import load_conditions
    from gender_condition.logging import setup_logging

    settings = get_settings()
    setup_logging(
        log_dir=settings.log_dir,
        log_level=settings.log_level,
        max_bytes=settings.log_rotation_size_mb * 1024 * 1024,
        backup_count=settings.log_backup_count,
    )

    path = file or settings.conditions_path
    try:
        data = load_conditions(path)
    except ConditionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not data:
        console.print(f"[yellow]No conditions configured in {path}[/yellow]")
        console.print("Run [bold]gender-condition init[/bold] to create example conditions")
        return

    factory = get_factory(settings, title_id)
    try:
        collection = factory.unserialize(data)
        results = [(c, c.is_matching()) for c in collection]
    except ConditionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title=f"Conditions for title id {title_id}")
    table.add_column("Service id", style="cyan")
    table.add_column("Operator", width=8)
    table.add_column("Value")
    table.add_column("Match", width=5)

    for condition, matched in results:
        table.add_row(
            condition.service_id,
            condition.operator.value,
            str(condition.value),
            "✓" if matched else "✗",
        )

    console.print(table)
    all_matched = all(matched for _, matched in results)
    console.print(f"Rule applies: {'[green]Yes[/green]' if all_matched else '[red]No[/red]'}")


@conditions_app.command("render")
def conditions_render(
    service_id: Annotated[str, typer.Argument(help="Condition service id")],
    value: Annotated[str | None, typer.Option("--value", "-v", help="Configured value")] = None,
    operator: Annotated[str, typer.Option("--operator", "-o", help="Comparison operator")] = "==",
) -> None:
    """Print the back-office HTML inputs of a condition."""
    factory = get_factory(get_settings())

    try:
        condition = factory.create(service_id)
        if value is not None:
            condition.set_validators(operator, value)
    except ConditionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    typer.echo(condition.draw_back_office_inputs())
