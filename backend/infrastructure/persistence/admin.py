from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from .models import (
    BOQItem,
    Delivery,
    MissingMaterial,
    Project,
    SmallJob,
    Upload,
)


@admin.register(Project)
class ProjectAdmin(SimpleHistoryAdmin):
    list_display = ('number', 'name', 'status', 'progress', 'material_ordering_activated')
    list_filter = ('status', 'material_ordering_activated')
    search_fields = ('number', 'name', 'description')
    readonly_fields = ('number', 'progress', 'version', 'created_at', 'updated_at')


@admin.register(Delivery)
class DeliveryAdmin(admin.ModelAdmin):
    list_display = ('date', 'time', 'type', 'project_name', 'location')
    list_filter = ('type', 'date')
    filter_horizontal = ('projects_involved',)
    readonly_fields = ('project_name',)


@admin.register(MissingMaterial)
class MissingMaterialAdmin(admin.ModelAdmin):
    list_display = ('material_name', 'steel_grade', 'quantity', 'unit', 'status', 'project')
    list_filter = ('status', 'unit')
    search_fields = ('material_name', 'steel_grade', 'project__name')


@admin.register(SmallJob)
class SmallJobAdmin(admin.ModelAdmin):
    list_display = ('title', 'order_number', 'status', 'created_at')
    list_filter = ('status',)


@admin.register(BOQItem)
class BOQItemAdmin(admin.ModelAdmin):
    list_display = ('project', 'section', 'description', 'quantity', 'unit', 'rate', 'amount')
    list_filter = ('section',)
    readonly_fields = ('amount',)


@admin.register(Upload)
class UploadAdmin(admin.ModelAdmin):
    list_display = ('file_name', 'project', 'upload_type', 'status', 'file_size', 'created_at')
    list_filter = ('upload_type', 'status')
    readonly_fields = ('file_name', 'file_path', 'file_size', 'file_type')
