from django.db import models


class SourceType(models.TextChoices):
    """Launch monitors whose CSV exports can be imported."""
    GARMIN_R10 = 'GARMIN_R10', 'Garmin R10'
    AWESOME_GOLF = 'AWESOME_GOLF', 'Awesome Golf'


class Session(models.Model):
    """One imported file's worth of shots, plus the metadata shared by all of them."""
    title = models.CharField(max_length=255)
    upload_date = models.DateTimeField(help_text="When the file was imported")
    session_date = models.DateTimeField(null=True, blank=True, help_text="When the shots were hit")
    location = models.CharField(max_length=255, blank=True, default='')
    source_type = models.CharField(max_length=20, choices=SourceType.choices, default=SourceType.GARMIN_R10)

    class Meta:
        ordering = ['-upload_date']

    def __str__(self):
        return f"{self.title} ({self.get_source_type_display()})"


class Shot(models.Model):
    """
    A single recorded strike. Every metric is nullable: a missing value means
    the device (or the row) did not report it, never zero.
    """
    session = models.ForeignKey(Session, on_delete=models.CASCADE, related_name='shots')
    shot_number = models.PositiveIntegerField(null=True, blank=True)
    club = models.CharField(max_length=255, blank=True, default='')
    club_description = models.CharField(max_length=255, blank=True, default='')
    shot_time = models.DateTimeField(null=True, blank=True)
    altitude = models.FloatField(null=True, blank=True, help_text="feet")

    # Ball flight
    ball_speed = models.FloatField(null=True, blank=True, help_text="mph")
    club_head_speed = models.FloatField(null=True, blank=True, help_text="mph")
    launch_angle = models.FloatField(null=True, blank=True, help_text="degrees")
    launch_direction = models.FloatField(null=True, blank=True, help_text="degrees, + right / - left")
    spin_rate = models.FloatField(null=True, blank=True, help_text="rpm")
    spin_axis = models.FloatField(null=True, blank=True, help_text="degrees")
    carry_distance = models.FloatField(null=True, blank=True, help_text="yards")
    total_distance = models.FloatField(null=True, blank=True, help_text="yards")
    roll_distance = models.FloatField(null=True, blank=True, help_text="yards")
    deviation = models.FloatField(null=True, blank=True, help_text="feet, + right / - left")
    apex = models.FloatField(null=True, blank=True, help_text="feet")

    # Club delivery
    attack_angle = models.FloatField(null=True, blank=True, help_text="degrees")
    face_angle = models.FloatField(null=True, blank=True, help_text="degrees")
    face_to_path = models.FloatField(null=True, blank=True, help_text="degrees")
    swing_path = models.FloatField(null=True, blank=True, help_text="degrees")
    swing_plane = models.FloatField(null=True, blank=True, help_text="degrees")
    vertical_face_impact = models.FloatField(null=True, blank=True, help_text="inches from center")
    horizontal_face_impact = models.FloatField(null=True, blank=True, help_text="inches from center")

    # Awesome Golf extras
    smash = models.FloatField(null=True, blank=True)
    peak_height = models.FloatField(null=True, blank=True, help_text="feet")
    descent_angle = models.FloatField(null=True, blank=True, help_text="degrees")
    horizontal_launch = models.FloatField(null=True, blank=True, help_text="degrees")
    carry_lateral_distance = models.FloatField(null=True, blank=True, help_text="yards")
    total_lateral_distance = models.FloatField(null=True, blank=True, help_text="yards")
    carry_curve_distance = models.FloatField(null=True, blank=True, help_text="yards")
    total_curve_distance = models.FloatField(null=True, blank=True, help_text="yards")
    dynamic_loft = models.FloatField(null=True, blank=True, help_text="degrees")
    spin_loft = models.FloatField(null=True, blank=True, help_text="degrees")
    low_point = models.FloatField(null=True, blank=True, help_text="inches")
    face_target = models.FloatField(null=True, blank=True, help_text="degrees")
    swing_plane_tilt = models.FloatField(null=True, blank=True, help_text="degrees")
    swing_plane_rotation = models.FloatField(null=True, blank=True, help_text="degrees")
    shot_classification = models.CharField(max_length=255, blank=True, default='')

    class Meta:
        ordering = ['shot_number', 'id']

    def __str__(self):
        club = self.club or 'Unknown club'
        if self.carry_distance is not None:
            return f"#{self.shot_number} {club} - {self.carry_distance} yards carry"
        return f"#{self.shot_number} {club}"
