from django.db import migrations, models
import doctors.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Doctor',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Nama')),
                ('specialty', models.CharField(max_length=100, verbose_name='Spesialisasi')),
                ('status', models.BooleanField(default=True, verbose_name='Aktif')),
                ('image_url', models.URLField(blank=True, null=True, verbose_name='Foto')),
                ('schedule', models.JSONField(default=doctors.models.empty_schedule, validators=[doctors.models.validate_schedule], verbose_name='Jadwal praktik')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Dibuat')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Diperbarui')),
            ],
            options={
                'verbose_name': 'Dokter',
                'verbose_name_plural': 'Dokter',
                'db_table': 'doctor',
                'ordering': ['name'],
            },
        ),
    ]
