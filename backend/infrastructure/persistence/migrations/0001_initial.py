import decimal
import uuid

import django.core.validators
import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models

import infrastructure.persistence.models.uploads


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ProjectSequence',
            fields=[
                ('key', models.CharField(max_length=50, primary_key=True, serialize=False, verbose_name='Ключ')),
                ('last_value', models.PositiveIntegerField(default=0, verbose_name='Последнее значение')),
            ],
            options={
                'db_table': 'project_sequences',
                'verbose_name': 'Счётчик номеров проектов',
                'verbose_name_plural': 'Счётчики номеров проектов',
            },
        ),
        migrations.CreateModel(
            name='Project',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('version', models.PositiveIntegerField(default=1, verbose_name='Версия')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('number', models.CharField(blank=True, help_text='PRJ-<год>-<порядковый номер>, присваивается автоматически', max_length=20, unique=True, verbose_name='Номер проекта')),
                ('name', models.CharField(max_length=500, verbose_name='Наименование')),
                ('description', models.TextField(blank=True, verbose_name='Описание')),
                ('status', models.CharField(choices=[('active', 'Активен'), ('completed', 'Завершён'), ('on-hold', 'Приостановлен')], db_index=True, default='active', max_length=20, verbose_name='Статус')),
                ('documentation_done', models.BooleanField(default=False, verbose_name='Документация готова')),
                ('materials_ordered', models.BooleanField(default=False, verbose_name='Материалы заказаны')),
                ('materials_received', models.BooleanField(default=False, verbose_name='Материалы получены')),
                ('design_approved', models.BooleanField(default=False, verbose_name='Проект согласован')),
                ('quality_checked', models.BooleanField(default=False, verbose_name='Контроль качества пройден')),
                ('client_approved', models.BooleanField(default=False, verbose_name='Принято клиентом')),
                ('material_ordering_activated', models.BooleanField(default=False, verbose_name='Идёт заказ материалов')),
                ('progress', models.PositiveSmallIntegerField(default=0, verbose_name='Процент выполнения')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='project_created', to=settings.AUTH_USER_MODEL, verbose_name='Создано пользователем')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='project_updated', to=settings.AUTH_USER_MODEL, verbose_name='Обновлено пользователем')),
            ],
            options={
                'verbose_name': 'Проект',
                'verbose_name_plural': 'Проекты',
                'db_table': 'projects',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['status', 'name'], name='projects_status_name_idx')],
            },
        ),
        migrations.CreateModel(
            name='HistoricalProject',
            fields=[
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Дата обновления')),
                ('version', models.PositiveIntegerField(default=1, verbose_name='Версия')),
                ('id', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, verbose_name='ID')),
                ('number', models.CharField(blank=True, db_index=True, help_text='PRJ-<год>-<порядковый номер>, присваивается автоматически', max_length=20, verbose_name='Номер проекта')),
                ('name', models.CharField(max_length=500, verbose_name='Наименование')),
                ('description', models.TextField(blank=True, verbose_name='Описание')),
                ('status', models.CharField(choices=[('active', 'Активен'), ('completed', 'Завершён'), ('on-hold', 'Приостановлен')], db_index=True, default='active', max_length=20, verbose_name='Статус')),
                ('documentation_done', models.BooleanField(default=False, verbose_name='Документация готова')),
                ('materials_ordered', models.BooleanField(default=False, verbose_name='Материалы заказаны')),
                ('materials_received', models.BooleanField(default=False, verbose_name='Материалы получены')),
                ('design_approved', models.BooleanField(default=False, verbose_name='Проект согласован')),
                ('quality_checked', models.BooleanField(default=False, verbose_name='Контроль качества пройден')),
                ('client_approved', models.BooleanField(default=False, verbose_name='Принято клиентом')),
                ('material_ordering_activated', models.BooleanField(default=False, verbose_name='Идёт заказ материалов')),
                ('progress', models.PositiveSmallIntegerField(default=0, verbose_name='Процент выполнения')),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField(db_index=True)),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('created_by', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Создано пользователем')),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('updated_by', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to=settings.AUTH_USER_MODEL, verbose_name='Обновлено пользователем')),
            ],
            options={
                'verbose_name': 'historical Проект',
                'verbose_name_plural': 'historical Проекты',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='Delivery',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('version', models.PositiveIntegerField(default=1, verbose_name='Версия')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(choices=[('delivery', 'Доставка'), ('pickup', 'Вывоз')], db_index=True, default='delivery', max_length=20, verbose_name='Тип')),
                ('date', models.DateField(db_index=True, verbose_name='Дата')),
                ('time', models.TimeField(verbose_name='Время')),
                ('project_name', models.CharField(blank=True, max_length=500, verbose_name='Наименование проекта')),
                ('location', models.CharField(blank=True, max_length=500, verbose_name='Адрес')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='delivery_created', to=settings.AUTH_USER_MODEL, verbose_name='Создано пользователем')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='delivery_updated', to=settings.AUTH_USER_MODEL, verbose_name='Обновлено пользователем')),
                ('project', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='deliveries', to='persistence.project', verbose_name='Проект')),
                ('projects_involved', models.ManyToManyField(blank=True, related_name='involved_deliveries', to='persistence.project', verbose_name='Дополнительные проекты')),
            ],
            options={
                'verbose_name': 'Доставка/вывоз',
                'verbose_name_plural': 'Доставки/вывозы',
                'db_table': 'deliveries',
                'ordering': ['date', 'time', 'created_at'],
                'indexes': [models.Index(fields=['date', 'time'], name='deliveries_date_time_idx')],
            },
        ),
        migrations.CreateModel(
            name='MissingMaterial',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('version', models.PositiveIntegerField(default=1, verbose_name='Версия')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('material_name', models.CharField(max_length=255, verbose_name='Материал')),
                ('steel_grade', models.CharField(help_text='Например S355, S275', max_length=50, verbose_name='Марка стали')),
                ('quantity', models.DecimalField(decimal_places=3, max_digits=12, validators=[django.core.validators.MinValueValidator(decimal.Decimal('0.001'))], verbose_name='Количество')),
                ('unit', models.CharField(choices=[('pieces', 'шт'), ('meters', 'м')], default='pieces', max_length=10, verbose_name='Ед. изм.')),
                ('status', models.CharField(choices=[('missing', 'Отсутствует'), ('quoted', 'Запрошено КП'), ('ordered', 'Заказано')], db_index=True, default='missing', max_length=20, verbose_name='Статус')),
                ('ordered_at', models.DateTimeField(blank=True, null=True, verbose_name='Дата заказа')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='missingmaterial_created', to=settings.AUTH_USER_MODEL, verbose_name='Создано пользователем')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='missingmaterial_updated', to=settings.AUTH_USER_MODEL, verbose_name='Обновлено пользователем')),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='missing_materials', to='persistence.project', verbose_name='Проект')),
            ],
            options={
                'verbose_name': 'Недостающий материал',
                'verbose_name_plural': 'Недостающие материалы',
                'db_table': 'missing_materials',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['project', 'status'], name='materials_project_status_idx')],
            },
        ),
        migrations.CreateModel(
            name='SmallJob',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('version', models.PositiveIntegerField(default=1, verbose_name='Версия')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255, verbose_name='Название')),
                ('order_number', models.CharField(blank=True, max_length=50, null=True, verbose_name='Номер заказа')),
                ('status', models.CharField(choices=[('pending', 'Ожидает'), ('in-progress', 'В работе'), ('completed', 'Выполнено')], db_index=True, default='pending', max_length=20, verbose_name='Статус')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='smalljob_created', to=settings.AUTH_USER_MODEL, verbose_name='Создано пользователем')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='smalljob_updated', to=settings.AUTH_USER_MODEL, verbose_name='Обновлено пользователем')),
            ],
            options={
                'verbose_name': 'Мелкая работа',
                'verbose_name_plural': 'Мелкие работы',
                'db_table': 'small_jobs',
                'ordering': ['created_at'],
            },
        ),
        migrations.CreateModel(
            name='BOQItem',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('version', models.PositiveIntegerField(default=1, verbose_name='Версия')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('section', models.CharField(max_length=255, verbose_name='Раздел')),
                ('position', models.PositiveIntegerField(default=0, verbose_name='Позиция')),
                ('description', models.TextField(verbose_name='Описание работ')),
                ('unit', models.CharField(max_length=20, verbose_name='Ед. изм.')),
                ('quantity', models.DecimalField(decimal_places=3, max_digits=14, verbose_name='Количество')),
                ('rate', models.DecimalField(blank=True, decimal_places=2, max_digits=14, null=True, verbose_name='Расценка')),
                ('amount', models.DecimalField(blank=True, decimal_places=2, max_digits=18, null=True, verbose_name='Сумма')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='boqitem_created', to=settings.AUTH_USER_MODEL, verbose_name='Создано пользователем')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='boqitem_updated', to=settings.AUTH_USER_MODEL, verbose_name='Обновлено пользователем')),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='boq_items', to='persistence.project', verbose_name='Проект')),
            ],
            options={
                'verbose_name': 'Позиция ВОР',
                'verbose_name_plural': 'Позиции ВОР',
                'db_table': 'boq_items',
                'ordering': ['section', 'position', 'created_at'],
            },
        ),
        migrations.CreateModel(
            name='Upload',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('version', models.PositiveIntegerField(default=1, verbose_name='Версия')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('file', models.FileField(max_length=500, upload_to=infrastructure.persistence.models.uploads.upload_to, verbose_name='Файл')),
                ('file_name', models.CharField(blank=True, max_length=255, verbose_name='Имя файла')),
                ('file_path', models.CharField(blank=True, max_length=500, verbose_name='Путь')),
                ('file_size', models.BigIntegerField(default=0, verbose_name='Размер, байт')),
                ('file_type', models.CharField(blank=True, max_length=100, verbose_name='MIME тип')),
                ('upload_type', models.CharField(choices=[('boq', 'Ведомость объёмов работ'), ('drawing', 'Чертёж'), ('document', 'Документ'), ('other', 'Прочее')], db_index=True, default='other', max_length=20, verbose_name='Тип загрузки')),
                ('status', models.CharField(choices=[('pending', 'Ожидает обработки'), ('processing', 'Обрабатывается'), ('processed', 'Обработан'), ('failed', 'Ошибка')], default='pending', max_length=20, verbose_name='Статус')),
                ('metadata', models.JSONField(blank=True, default=dict, verbose_name='Метаданные')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='upload_created', to=settings.AUTH_USER_MODEL, verbose_name='Создано пользователем')),
                ('updated_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='upload_updated', to=settings.AUTH_USER_MODEL, verbose_name='Обновлено пользователем')),
                ('project', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='uploads', to='persistence.project', verbose_name='Проект')),
            ],
            options={
                'verbose_name': 'Загруженный файл',
                'verbose_name_plural': 'Загруженные файлы',
                'db_table': 'uploads',
                'ordering': ['-created_at'],
            },
        ),
    ]
