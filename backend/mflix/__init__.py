"""Movie catalog API and browser client over the sample_mflix dataset."""
