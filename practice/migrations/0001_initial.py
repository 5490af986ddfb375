import django.db.models.deletion
from django.db import migrations, models


def _metric(help_text=''):
    return models.FloatField(blank=True, null=True, help_text=help_text)


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Session',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255)),
                ('upload_date', models.DateTimeField(help_text='When the file was imported')),
                ('session_date', models.DateTimeField(blank=True, null=True, help_text='When the shots were hit')),
                ('location', models.CharField(blank=True, default='', max_length=255)),
                ('source_type', models.CharField(
                    choices=[('GARMIN_R10', 'Garmin R10'), ('AWESOME_GOLF', 'Awesome Golf')],
                    default='GARMIN_R10',
                    max_length=20,
                )),
            ],
            options={
                'ordering': ['-upload_date'],
            },
        ),
        migrations.CreateModel(
            name='Shot',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('shot_number', models.PositiveIntegerField(blank=True, null=True)),
                ('club', models.CharField(blank=True, default='', max_length=255)),
                ('club_description', models.CharField(blank=True, default='', max_length=255)),
                ('shot_time', models.DateTimeField(blank=True, null=True)),
                ('altitude', _metric('feet')),
                ('ball_speed', _metric('mph')),
                ('club_head_speed', _metric('mph')),
                ('launch_angle', _metric('degrees')),
                ('launch_direction', _metric('degrees, + right / - left')),
                ('spin_rate', _metric('rpm')),
                ('spin_axis', _metric('degrees')),
                ('carry_distance', _metric('yards')),
                ('total_distance', _metric('yards')),
                ('roll_distance', _metric('yards')),
                ('deviation', _metric('feet, + right / - left')),
                ('apex', _metric('feet')),
                ('attack_angle', _metric('degrees')),
                ('face_angle', _metric('degrees')),
                ('face_to_path', _metric('degrees')),
                ('swing_path', _metric('degrees')),
                ('swing_plane', _metric('degrees')),
                ('vertical_face_impact', _metric('inches from center')),
                ('horizontal_face_impact', _metric('inches from center')),
                ('smash', _metric()),
                ('peak_height', _metric('feet')),
                ('descent_angle', _metric('degrees')),
                ('horizontal_launch', _metric('degrees')),
                ('carry_lateral_distance', _metric('yards')),
                ('total_lateral_distance', _metric('yards')),
                ('carry_curve_distance', _metric('yards')),
                ('total_curve_distance', _metric('yards')),
                ('dynamic_loft', _metric('degrees')),
                ('spin_loft', _metric('degrees')),
                ('low_point', _metric('inches')),
                ('face_target', _metric('degrees')),
                ('swing_plane_tilt', _metric('degrees')),
                ('swing_plane_rotation', _metric('degrees')),
                ('shot_classification', models.CharField(blank=True, default='', max_length=255)),
                ('session', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='shots',
                    to='practice.session',
                )),
            ],
            options={
                'ordering': ['shot_number', 'id'],
            },
        ),
    ]
