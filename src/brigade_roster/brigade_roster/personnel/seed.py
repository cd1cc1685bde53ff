"""Demo roster loaded when ``SEED_DEMO_DATA`` is enabled."""
from __future__ import annotations

from datetime import date, datetime
from typing import List

from .model import Personnel

_SEED_UPDATED_AT = datetime(2025, 10, 24, 10, 0, 0)

# (given names, surnames, rank, specialty, status, phone, email user, address, join date, photo #)
_ROWS = [
    ("Juan Carlos", "González Muñoz", "Comandante", "Rescate Vehicular", "Activo",
     "+56 9 1234 5678", "juan.gonzalez", "Av. Libertad 123", date(2015, 3, 15), 1),
    ("María Paz", "Rojas Silva", "Capitán", "Materiales Peligrosos", "Activo",
     "+56 9 2345 6789", "maria.rojas", "Calle Valparaíso 456", date(2016, 7, 20), 2),
    ("Pedro Antonio", "Díaz Pérez", "Teniente", "Incendios Forestales", "Activo",
     "+56 9 3456 7890", "pedro.diaz", "Pasaje Los Héroes 789", date(2017, 11, 5), 3),
    ("Ana Isabel", "Soto Contreras", "Sargento", "Primeros Auxilios", "Activo",
     "+56 9 4567 8901", "ana.soto", "Av. Marina 321", date(2018, 2, 14), 4),
    ("Luis Fernando", "Martínez López", "Cabo", "Rescate en Altura", "Activo",
     "+56 9 5678 9012", "luis.martinez", "Calle Quillota 654", date(2019, 6, 30), 5),
    ("Carolina Andrea", "Sepúlveda Morales", "Bombero", None, "Activo",
     "+56 9 6789 0123", "carolina.sepulveda", "Pasaje Los Robles 987", date(2020, 9, 12), 6),
    ("Roberto Carlos", "Rodríguez Torres", "Bombero", None, "Licencia",
     "+56 9 7890 1234", "roberto.rodriguez", "Av. España 147", date(2021, 1, 25), 7),
    ("Patricia Elena", "Fuentes Hernández", "Bombero", None, "Activo",
     "+56 9 8901 2345", "patricia.fuentes", "Calle Arlegui 258", date(2022, 4, 18), 8),
    ("Diego Alejandro", "Flores Espinoza", "Bombero", None, "Activo",
     "+56 9 9012 3456", "diego.flores", "Pasaje San Martín 369", date(2023, 8, 7), 1),
    ("Valentina Sofía", "Valenzuela Castillo", "Bombero", None, "Inactivo",
     "+56 9 0123 4567", "valentina.valenzuela", "Av. Agua Santa 741", date(2024, 2, 20), 2),
]


def demo_personnel() -> List[Personnel]:
    records = []
    for index, row in enumerate(_ROWS, start=1):
        given, surnames, rank, specialty, status, phone, mail, street, joined, photo = row
        records.append(
            Personnel(
                personnel_id=index,
                given_names=given,
                surnames=surnames,
                rank=rank,
                status=status,
                created_at=datetime.combine(joined, datetime.min.time()).replace(hour=10),
                updated_at=_SEED_UPDATED_AT,
                specialty=specialty,
                phone=phone,
                email=f"{mail}@bomberos.cl",
                address=f"{street}, Viña del Mar",
                join_date=joined,
                photo_url=f"/assets/bomberos/bombero-{photo}.jpg",
            )
        )
    return records
