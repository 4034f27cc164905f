class CalculatorSnapshot:
    """Read-only view of calculator state, handed to the UI after each operation."""

    FIELDS = ('display', 'previous_operand', 'operation', 'error')

    def __init__(self, display="0", previous_operand=None, operation=None, error=None):
        self.display = display                      # Text shown in the main display
        self.previous_operand = previous_operand    # Stashed first operand, or None
        self.operation = operation                  # Pending operation symbol (+ - * /), or None
        self.error = error                          # Error message, or None

    @property
    def has_error(self):
        return self.error is not None

    def to_dict(self):
        return {name: getattr(self, name) for name in self.FIELDS}

    @classmethod
    def from_dict(cls, data):
        """Build a snapshot from a dict; missing keys take the initial-state defaults."""
        return cls(**{name: data[name] for name in cls.FIELDS if name in data})

    def __eq__(self, other):
        if not isinstance(other, CalculatorSnapshot):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        fields = ', '.join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"CalculatorSnapshot({fields})"
