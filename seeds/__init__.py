"""Fixture loaders. One module per table, applied in filename order by `seeder.run_seeds`."""
