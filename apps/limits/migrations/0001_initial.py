from django.db import migrations, models
import django.db.models.deletion

RULE_HELP = "Rules are checked in ascending order; the first failure is reported."
PERIOD_CHOICES = [
    ('BUY_TOTAL', 'Lifetime purchase cap'),
    ('BUY_YEAR', 'Yearly purchase cap'),
    ('BUY_QUARTER', 'Quarterly purchase cap'),
    ('BUY_MONTH', 'Monthly purchase cap'),
    ('BUY_DAILY', 'Daily purchase cap'),
]
COUPON_CHOICE = [('SPECIFY_COUPON', 'Requires coupon (retired)')]


def rule_fields():
    return [
        ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
        ('value', models.CharField(blank=True, max_length=255, null=True)),
        ('sort_order', models.PositiveIntegerField(default=0, help_text=RULE_HELP)),
        ('remark', models.CharField(blank=True, max_length=255)),
        ('created_at', models.DateTimeField(auto_now_add=True)),
        ('updated_at', models.DateTimeField(auto_now=True)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='SkuLimitRule',
            fields=rule_fields() + [
                ('type', models.CharField(choices=[('MIN_QUANTITY', 'Minimum quantity per order')] + COUPON_CHOICE + [('SKU_MUTEX', 'Mutually exclusive with SKU')] + PERIOD_CHOICES, max_length=32)),
                ('sku', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='limit_rules', to='catalog.sku')),
            ],
            options={
                'verbose_name': 'SKU limit rule',
                'ordering': ['sort_order', 'id'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='SpuLimitRule',
            fields=rule_fields() + [
                ('type', models.CharField(choices=COUPON_CHOICE + [('SPU_MUTEX', 'Mutually exclusive with SPU')] + PERIOD_CHOICES, max_length=32)),
                ('spu', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='limit_rules', to='catalog.spu')),
            ],
            options={
                'verbose_name': 'SPU limit rule',
                'ordering': ['sort_order', 'id'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='CategoryLimitRule',
            fields=rule_fields() + [
                ('type', models.CharField(choices=COUPON_CHOICE + PERIOD_CHOICES, max_length=32)),
                ('category', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='limit_rules', to='catalog.category')),
            ],
            options={
                'verbose_name': 'Category limit rule',
                'ordering': ['sort_order', 'id'],
                'abstract': False,
            },
        ),
    ]
