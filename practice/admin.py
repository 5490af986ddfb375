from django.contrib import admin

from .models import Session, Shot


class ShotInline(admin.TabularInline):
    model = Shot
    extra = 0
    fields = ('shot_number', 'club', 'ball_speed', 'carry_distance', 'total_distance', 'shot_classification')
    readonly_fields = fields
    can_delete = False
    show_change_link = True


@admin.register(Session)
class SessionAdmin(admin.ModelAdmin):
    list_display = ('title', 'location', 'source_type', 'session_date', 'upload_date')
    list_filter = ('source_type',)
    search_fields = ('title', 'location')
    readonly_fields = ('upload_date', 'source_type')
    inlines = [ShotInline]


@admin.register(Shot)
class ShotAdmin(admin.ModelAdmin):
    list_display = ('session', 'shot_number', 'club', 'carry_distance', 'total_distance', 'ball_speed')
    list_filter = ('club',)
    search_fields = ('club', 'session__title')
