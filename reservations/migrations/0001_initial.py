from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('doctors', '0001_initial'),
        ('services', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Reservation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('queue_number', models.CharField(max_length=10, verbose_name='Nomor antrian')),
                ('patient_name', models.CharField(max_length=100, verbose_name='Nama pasien')),
                ('email', models.EmailField(max_length=254, verbose_name='Email')),
                ('phone', models.CharField(max_length=20, verbose_name='Telepon')),
                ('appointment_date', models.DateField(verbose_name='Tanggal kunjungan')),
                ('appointment_time', models.CharField(max_length=5, verbose_name='Jam kunjungan')),
                ('status', models.CharField(choices=[('waiting', 'Menunggu'), ('confirmed', 'Dikonfirmasi'), ('cancelled', 'Dibatalkan'), ('completed', 'Selesai')], default='waiting', max_length=20, verbose_name='Status')),
                ('notes', models.TextField(blank=True, null=True, verbose_name='Catatan')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Dibuat')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Diperbarui')),
                ('doctor', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='reservations', to='doctors.doctor')),
                ('service', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='reservations', to='services.service')),
            ],
            options={
                'verbose_name': 'Reservasi',
                'verbose_name_plural': 'Reservasi',
                'db_table': 'reservation',
                'ordering': ['-created_at'],
                'indexes': [models.Index(fields=['appointment_date', 'status'], name='reservation_day_status_idx')],
                'constraints': [models.UniqueConstraint(fields=('appointment_date', 'queue_number'), name='unique_queue_number_per_day')],
            },
        ),
    ]
