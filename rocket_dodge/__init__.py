from gymnasium.envs.registration import register

# This tells Gymnasium that "RocketDodge-v0" exists
# and where to find the class (rocket_dodge.rocket_dodge:RocketDodge).
register(
    id='RocketDodge-v0',
    entry_point='rocket_dodge.rocket_dodge:RocketDodge',
    max_episode_steps=3600, # One minute at 60 FPS; a run that survives that long is truncated.
)
