"""Modelos do formato de fio dos eventos de documento Firestore.

Corpo JSON de um CloudEvent `google.cloud.firestore.document.v1.*`
entregue pelo Eventarc com content-type application/json:

    {
        "value": {"name": ..., "fields": {...}, "createTime": ..., "updateTime": ...},
        "oldValue": {...},
        "updateMask": {"fieldPaths": [...]}
    }

`value` existe em created/updated; `oldValue` em updated/deleted.
Os valores de `fields` continuam no formato tagueado (stringValue, ...)
e são decodificados por `decoder`. `createTime` e `updateMask` são
ignorados: o diff é calculado a partir dos próprios snapshots.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DocumentSnapshot(BaseModel):
    """Snapshot de documento (caminho, timestamp de atualização e campos tagueados)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = ""
    fields: dict[str, Any] | None = None
    update_time: str | None = Field(default=None, alias="updateTime")


class DocumentEventData(BaseModel):
    """Evento bruto com snapshots antes/depois."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    value: DocumentSnapshot | None = None
    old_value: DocumentSnapshot | None = Field(default=None, alias="oldValue")
