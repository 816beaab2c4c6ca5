from django.db import migrations, models


def fill_search_columns(apps, schema_editor):
    Venue = apps.get_model("venues", "Venue")
    for venue in Venue.objects.all().only("pk", "name", "city"):
        venue.search_name = venue.name.casefold()
        venue.search_city = venue.city.casefold()
        venue.save(update_fields=["search_name", "search_city"])


class Migration(migrations.Migration):

    dependencies = [
        ("venues", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="venue",
            name="search_name",
            field=models.TextField(default="", editable=False),
        ),
        migrations.AddField(
            model_name="venue",
            name="search_city",
            field=models.TextField(default="", editable=False),
        ),
        migrations.RunPython(fill_search_columns, migrations.RunPython.noop),
    ]
