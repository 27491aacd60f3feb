from dataclasses import dataclass, field
from typing import Callable

from celestius.state.form_state import FormState, initial_state


@dataclass
class AppState:
    form: FormState = field(default_factory=initial_state)

    def apply(self, transition: Callable[..., FormState], *args) -> FormState:
        self.form = transition(self.form, *args)
        return self.form
