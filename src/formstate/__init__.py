"""formstate — path-addressed form values with per-field validation.

Keeps one document of user-entered values addressed by dot paths
(``"address.street"``, ``"hobbies.0"``), tracks which fields are touched
and dirty, validates on blur and on submit.

Basic usage::

    from formstate import FormStore

    store = FormStore()
    store.register("name", required=True)
    store.register("email", required=True, pattern=r"[^@]+@[^@]+\\.[a-z]{2,}")

    store.set_field_value("name", "Ada")
    store.set_field_value("email", "ada@example.com")
    store.submit(save)        # save({"name": "Ada", "email": "ada@example.com"})

Bulk updates::

    store.load({"name": "Ada", "address.street": "Main St"})
"""

__version__ = "0.1.0"
__all__ = [
    "ChangeEvent",
    "FieldBinding",
    "FormConfig",
    "FormState",
    "FormStateError",
    "FormStore",
    "InputEvent",
    "InputTarget",
    "PathError",
    "Pattern",
    "Required",
    "RuleSet",
    "RuleSetError",
    "SubmitEvent",
    "Validate",
    "ValidationResult",
    "evaluate",
    "get_value",
    "remove_value",
    "set_value",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import formstate`` fast while providing a clean top-level API.
    """
    if name in ("FormStore", "FormState"):
        from formstate import store as _store

        return getattr(_store, name)

    if name == "FormConfig":
        from formstate.config import FormConfig

        return FormConfig

    if name in ("FieldBinding", "InputEvent", "InputTarget", "SubmitEvent"):
        from formstate import binding as _binding

        return getattr(_binding, name)

    if name == "ChangeEvent":
        from formstate.reactive import ChangeEvent

        return ChangeEvent

    if name in ("Pattern", "Required", "RuleSet", "Validate", "ValidationResult", "evaluate"):
        from formstate import validation as _validation

        return getattr(_validation, name)

    if name in ("get_value", "remove_value", "set_value"):
        from formstate import paths as _paths

        return getattr(_paths, name)

    if name in ("FormStateError", "PathError", "RuleSetError"):
        from formstate import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
