from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WizardSessionKeys:
    """Namespaced session-state keys for one wizard instance."""

    wizard_id: str

    @property
    def prefix(self) -> str:
        return f"wiz:{self.wizard_id}:"

    def namespace(self, key: str) -> str:
        return f"{self.prefix}{key}"

    @property
    def section_index(self) -> str:
        return self.namespace("section_index")

    @property
    def values(self) -> str:
        return self.namespace("values")

    @property
    def errors(self) -> str:
        return self.namespace("errors")

    @property
    def submitted(self) -> str:
        return self.namespace("submitted")

    def widget(self, field_id: str) -> str:
        """Return the widget key used to render ``field_id``."""

        return self.namespace(f"field:{field_id}")
