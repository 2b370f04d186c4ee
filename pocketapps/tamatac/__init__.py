"""Virtual-pet extras: achievements, the pet cemetery and mini-games."""