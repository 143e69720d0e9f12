"""SecondChance Auth API."""
