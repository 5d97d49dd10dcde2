from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalog', '0001_initial'),
        ('orders', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='LimitViolationLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('message', models.TextField()),
                ('log_type', models.CharField(choices=[('INFO', 'Info'), ('WARNING', 'Warning'), ('ERROR', 'Error')], default='INFO', max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('scope', models.CharField(choices=[('SKU', 'SKU'), ('SPU', 'SPU'), ('CATEGORY', 'Category')], max_length=10)),
                ('kind', models.CharField(choices=[('HARD_EXCEEDED', 'Already bought more than the limit'), ('REST_EXCEEDED', 'Order would exceed the remaining allowance'), ('MIN_QUANTITY', 'Below the minimum quantity'), ('MUTEX_CURRENT_ORDER', 'Conflicting item in this order'), ('MUTEX_HISTORY', 'Conflicting item bought before')], max_length=32)),
                ('code', models.CharField(db_index=True, max_length=40)),
                ('rule_id', models.PositiveIntegerField(blank=True, null=True)),
                ('limit', models.IntegerField(default=0)),
                ('actual_count', models.IntegerField(default=0)),
                ('rest', models.IntegerField(blank=True, null=True)),
                ('order', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, to='orders.order')),
                ('sku', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to='catalog.sku')),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
    ]
