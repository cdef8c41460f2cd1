from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("category", models.CharField(max_length=255)),
                ("name", models.CharField(max_length=255)),
            ],
            options={
                "db_table": "products",
                "indexes": [
                    models.Index(
                        fields=["category", "id"], name="products_category_idx"
                    )
                ],
            },
        ),
    ]
