from typing import List, Mapping


class SearchForm:
    """Single required free-text search field."""

    field_name = 'search'
    label = 'Search'
    blank_message = 'This value should not be blank.'

    def __init__(self, data: Mapping[str, str]):
        self.submitted = self.field_name in data
        self.value = data.get(self.field_name) or ''
        self.errors: List[str] = []

    def validate(self) -> bool:
        """Return True when the form was submitted with a non-blank term."""
        self.errors = []
        if not self.submitted:
            return False
        if not self.value.strip():
            self.errors.append(self.blank_message)
            return False
        return True

    @property
    def term(self) -> str:
        return self.value.strip()
