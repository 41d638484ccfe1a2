"""
Funciones que imprimen directamente a la consola.
"""

from collections.abc import Mapping
from typing import Optional

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from formulario.cli.theme.palette import get_console, get_palette
from formulario.models.field import FieldRule
from formulario.models.form import Section


KIND_LABELS = {
    "text": "Texto",
    "textarea": "Texto multilínea",
    "single_choice": "Opción única",
    "multi_choice": "Opción múltiple",
}


def print_header(text: str, subtitle: Optional[str] = None) -> None:
    """Imprime un encabezado."""
    console = get_console()
    p = get_palette()
    content = Text(text, style=f"bold {p.primary}")
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)
    console.print(Panel(content, border_style=p.border, box=box.ROUNDED, padding=(0, 2)))


def print_step(step_num: int, total: int, title: str) -> None:
    """Imprime el indicador de sección con barra de progreso."""
    console = get_console()
    p = get_palette()

    bar_width = 30
    filled_width = int((step_num / total) * bar_width)
    percentage = int((step_num / total) * 100)

    progress_line = Text()
    progress_line.append("█" * filled_width, style=p.primary)
    progress_line.append("░" * (bar_width - filled_width), style=p.muted)
    progress_line.append(f"  {percentage}%", style=p.muted)

    panel = Panel(
        progress_line,
        title=Text(f" Sección {step_num} de {total}", style=f"bold {p.secondary}"),
        subtitle=Text(title, style=f"italic {p.muted}"),
        subtitle_align="left",
        title_align="left",
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 1),
        width=50,
    )
    console.print()
    console.print(panel)


def print_success(text: str) -> None:
    get_console().print(Text(f"[+] {text}", style=get_palette().success))


def print_warning(text: str) -> None:
    get_console().print(Text(f"[!] {text}", style=get_palette().warning))


def print_error(text: str) -> None:
    get_console().print(Text(f"[x] {text}", style=get_palette().error))


def print_info(text: str) -> None:
    get_console().print(Text(f"[i] {text}", style=get_palette().info))


def print_violations(section: Section, errors: Mapping[str, str]) -> None:
    """Imprime las violaciones de una sección, en el orden de sus campos."""
    console = get_console()
    p = get_palette()
    for fld in section.fields:
        message = errors.get(fld.field_id)
        if message is None:
            continue
        line = Text("  ")
        line.append(f"{fld.display_label}: ", style=p.label)
        line.append(message, style=p.error)
        console.print(line)


def _rules_text(fld: FieldRule) -> str:
    rules = []
    if fld.required:
        rules.append("requerido")
    if fld.min_length is not None:
        rules.append(f"mín {fld.min_length}")
    if fld.max_length is not None:
        rules.append(f"máx {fld.max_length}")
    return ", ".join(rules) or "-"


def create_fields_table(section: Section, title: Optional[str] = None) -> Table:
    """Crea tabla con los campos de una sección."""
    p = get_palette()
    table = Table(
        title=title or section.title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
    )
    table.add_column("ID", style=p.muted, no_wrap=True)
    table.add_column("Etiqueta")
    table.add_column("Tipo")
    table.add_column("Reglas")
    table.add_column("Opciones", style=p.muted)

    for fld in section.fields:
        table.add_row(
            fld.field_id,
            fld.display_label,
            KIND_LABELS.get(fld.kind.value, fld.kind.value),
            _rules_text(fld),
            ", ".join(o.label for o in fld.options) or "-",
        )
    return table
