"""Sidebar page catalog and static page content."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Page:
    """A page in the workspace sidebar."""

    id: str
    name: str
    icon: str
    blurbs: tuple[str, ...] = field(default_factory=tuple)

    @property
    def label(self) -> str:
        return f"{self.icon} {self.name}"


PAGES: tuple[Page, ...] = (
    Page(
        "today",
        "Hoy",
        "✨",
        (
            "Bienvenida. Aquí vas a tener tu día clarito: prioridades, notas y cositas bonitas.",
            "“Un día a la vez, pero contigo todo se siente más ligero.” 🌷",
        ),
    ),
    Page("tasks", "Tareas", "✅", ("Listas sugeridas: Escuela, Personal, Casa, Recurrentes",)),
    Page(
        "notes",
        "Notas",
        "📝",
        (
            "Luego sera con guardado automatico.",
            "Idea: “cosas que no debo olvidar esta semana…”",
        ),
    ),
    Page("memories", "Recuerdos", "📷", ("Después metere para subir fotos y escribirte una mini-carta.",)),
    Page("pinterest", "Pinterest", "📌", ("Selecciona uno y aqui se te mostrará el contenido jiji.",)),
)


def find_page(page_id: str) -> Page | None:
    """Look up a page by id."""
    return next((p for p in PAGES if p.id == page_id), None)
