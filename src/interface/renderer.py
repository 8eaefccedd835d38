"""Plain-text rendering of fleet reports."""

from typing import List

from .reports import EntityReport, FleetReport


class FleetRenderer:
    """Renders fleet reports as aligned text tables."""

    def render(self, report: FleetReport) -> str:
        """Render one fleet.

        Output format:
        Fleet 1
          Starbase #1  (1, 1)  HP 500.0/500.0  DEF 24.50  docked: 2, 3
          Starship #2  (1, 1)  HP  80.0/100.0  DEF  8.00  ATK 24.00  crew 8  [docked]

        Args:
            report: Fleet snapshot

        Returns:
            Multi-line string
        """
        header = report.label
        if report.defeated:
            header += "  (defeated)"

        lines = [header]
        for entity in [*report.starbases, *report.starships]:
            lines.append("  " + self._render_entity_line(entity))

        if len(lines) == 1:
            lines.append("  (no entities)")

        return "\n".join(lines)

    def _render_entity_line(self, entity: EntityReport) -> str:
        """Render a single entity row.

        Args:
            entity: Entity snapshot

        Returns:
            One line of text
        """
        parts = [
            f"{entity.variant} #{entity.id}",
            f"({entity.x}, {entity.y})",
            f"HP {entity.health:5.1f}/{entity.max_health:.1f}",
            f"DEF {entity.defence_strength:5.2f}",
        ]

        if entity.variant == "Starship":
            parts.append(f"ATK {entity.attack_strength:5.2f}")
            parts.append(f"crew {entity.crew}")
            if entity.repairing:
                parts.append("[repairing]")
            elif entity.docked:
                parts.append("[docked]")
        elif entity.docked_starship_ids:
            parts.append("docked: " + ", ".join(str(i) for i in entity.docked_starship_ids))

        if entity.destroyed:
            parts.append("DESTROYED")

        return "  ".join(parts)

    def render_all(self, reports: List[FleetReport]) -> str:
        """Render several fleets separated by blank lines."""
        return "\n\n".join(self.render(r) for r in reports)
