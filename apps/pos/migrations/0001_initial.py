import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Pos',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200, unique=True)),
                ('description', models.TextField(blank=True)),
                ('type', models.CharField(choices=[('cafe', 'Cafe'), ('vending_machine', 'Vending Machine'), ('bakery', 'Bakery'), ('cafeteria', 'Cafeteria')], default='cafe', max_length=20)),
                ('campus', models.CharField(choices=[('altstadt', 'Altstadt'), ('bergheim', 'Bergheim'), ('inf', 'Im Neuenheimer Feld')], default='altstadt', max_length=20)),
                ('street', models.CharField(max_length=200)),
                ('house_number', models.CharField(max_length=10)),
                ('postal_code', models.CharField(max_length=10)),
                ('city', models.CharField(max_length=100)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'point of sale',
                'verbose_name_plural': 'points of sale',
                'db_table': 'pos',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['campus'], name='pos_campus_idx')],
            },
        ),
    ]
