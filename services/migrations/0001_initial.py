from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Service',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Nama layanan')),
                ('description', models.TextField(blank=True, null=True, verbose_name='Deskripsi')),
                ('price', models.PositiveIntegerField(verbose_name='Harga (Rp)')),
                ('duration', models.PositiveIntegerField(verbose_name='Durasi (menit)')),
                ('icon', models.CharField(default='stethoscope', max_length=50, verbose_name='Ikon')),
                ('color', models.CharField(default='blue', max_length=50, verbose_name='Warna')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Dibuat')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Diperbarui')),
            ],
            options={
                'verbose_name': 'Layanan',
                'verbose_name_plural': 'Layanan',
                'db_table': 'service',
                'ordering': ['name'],
            },
        ),
    ]
