"""Deterministic pseudonym allocation for employees and projects.

Employees get spreadsheet-column codes: "Employee A" ... "Employee Z",
"Employee AA", "Employee AB", ...
Projects get Greek letter names: "Project Alpha" ... "Project Omega", then
fall back to column codes starting at "Project AA".

Assignment order is the case-insensitive sort order of the real names, so the
same name set always yields the same mapping.
"""

from collections.abc import Callable, Iterable

from privacy_relay.anonymization.exceptions import PseudonymAllocationError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

GREEK_LETTERS: tuple[str, ...] = (
    "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta", "Theta",
    "Iota", "Kappa", "Lambda", "Mu", "Nu", "Xi", "Omicron", "Pi",
    "Rho", "Sigma", "Tau", "Upsilon", "Phi", "Chi", "Psi", "Omega",
)

# First two-letter code ("AA") in the column sequence.
_FIRST_DOUBLE_CODE = len(ALPHABET)


def column_code(index: int) -> str:
    """Return the bijective base-26 code for a zero-based *index*.

    0 -> "A", 25 -> "Z", 26 -> "AA", 701 -> "ZZ", 702 -> "AAA".
    """
    if index < 0:
        raise PseudonymAllocationError(f"Sequence index must be >= 0, got {index}")

    letters: list[str] = []
    n = index + 1
    while n > 0:
        n, remainder = divmod(n - 1, len(ALPHABET))
        letters.append(ALPHABET[remainder])
    return "".join(reversed(letters))


def employee_pseudonym(index: int) -> str:
    return f"Employee {column_code(index)}"


def project_pseudonym(index: int) -> str:
    if index < 0:
        raise PseudonymAllocationError(f"Sequence index must be >= 0, got {index}")
    if index < len(GREEK_LETTERS):
        return f"Project {GREEK_LETTERS[index]}"
    return f"Project {column_code(index - len(GREEK_LETTERS) + _FIRST_DOUBLE_CODE)}"


def sort_names(names: Iterable[str]) -> list[str]:
    """Distinct names in case-insensitive ordinal order, exact order breaking ties."""
    return sorted(set(names), key=lambda name: (name.lower(), name))


class PseudonymAllocator:
    """Assigns one pseudonym per distinct real name.

    Usage:
        allocator = PseudonymAllocator.for_employees()
        allocator.allocate(["John Doe", "Jane Smith"])
        # {"Jane Smith": "Employee A", "John Doe": "Employee B"}
    """

    def __init__(self, generator: Callable[[int], str]) -> None:
        self._generator = generator

    @classmethod
    def for_employees(cls) -> "PseudonymAllocator":
        return cls(employee_pseudonym)

    @classmethod
    def for_projects(cls) -> "PseudonymAllocator":
        return cls(project_pseudonym)

    def sequence(self, count: int) -> list[str]:
        """Return the first *count* pseudonyms of this allocator's sequence."""
        if count < 0:
            raise PseudonymAllocationError(f"Pseudonym count must be >= 0, got {count}")
        return [self._generator(i) for i in range(count)]

    def allocate(self, names: Iterable[str]) -> dict[str, str]:
        """Map each distinct name to its pseudonym in sorted-name order."""
        ordered = sort_names(names)
        if not ordered:
            return {}
        return dict(zip(ordered, self.sequence(len(ordered))))
