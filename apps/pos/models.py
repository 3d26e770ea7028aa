# ==========================================
# apps/pos/models.py
# ==========================================

from django.db import models
import uuid


class PosType(models.TextChoices):
    CAFE = 'cafe', 'Cafe'
    VENDING_MACHINE = 'vending_machine', 'Vending Machine'
    BAKERY = 'bakery', 'Bakery'
    CAFETERIA = 'cafeteria', 'Cafeteria'


class Campus(models.TextChoices):
    ALTSTADT = 'altstadt', 'Altstadt'
    BERGHEIM = 'bergheim', 'Bergheim'
    INF = 'inf', 'Im Neuenheimer Feld'


class Pos(models.Model):
    """Point of sale on campus that can be reviewed."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, unique=True)
    description = models.TextField(blank=True)
    type = models.CharField(max_length=20, choices=PosType.choices, default=PosType.CAFE)
    campus = models.CharField(max_length=20, choices=Campus.choices, default=Campus.ALTSTADT)
    street = models.CharField(max_length=200)
    house_number = models.CharField(max_length=10)
    postal_code = models.CharField(max_length=10)
    city = models.CharField(max_length=100)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'pos'
        verbose_name = 'point of sale'
        verbose_name_plural = 'points of sale'
        indexes = [
            models.Index(fields=['campus'], name='pos_campus_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name
