"""
Composite validation error returned to callers.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional


class FriendlyValidationError(Exception):
    """
    Aggregated, user-presentable validation error.

    ``messages`` keeps the rendered per-field messages in failure order and
    ``message`` joins them. Statically configured fields (``name``, ``code``)
    and the per-failure detail list live in :attr:`fields` and are readable as
    attributes or keys.
    """

    def __init__(
        self,
        messages: Iterable[str],
        *,
        delimiter: str,
        model_name: str,
        options: Mapping[str, Any],
        fields: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.messages: List[str] = list(messages)
        self.delimiter = delimiter
        self.message = delimiter.join(self.messages)
        self.model_name = model_name
        self.options: Dict[str, Any] = dict(options)
        self.fields: Dict[str, Any] = dict(fields or {})
        super().__init__(self.message)

    def __reduce__(self):
        return (
            _restore,
            (type(self), self.messages, self.delimiter, self.model_name, self.options, self.fields),
        )

    def __getattr__(self, item: str) -> Any:
        fields = self.__dict__.get("fields")
        if fields is not None and item in fields:
            return fields[item]
        raise AttributeError(item)

    def __getitem__(self, key: str) -> Any:
        return self.to_dict()[key]

    def __contains__(self, key: object) -> bool:
        return key in self.to_dict()

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = dict(self.fields)
        payload.update(
            {
                "message": self.message,
                "messages": list(self.messages),
                "model_name": self.model_name,
                "options": dict(self.options),
            }
        )
        return payload


def _restore(cls, messages, delimiter, model_name, options, fields):
    return cls(messages, delimiter=delimiter, model_name=model_name, options=options, fields=fields)
