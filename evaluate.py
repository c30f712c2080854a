import argparse
import time

import gymnasium as gym
from stable_baselines3 import PPO

import rocket_dodge  # Registers the environment

def main():
    parser = argparse.ArgumentParser(description="Watch a trained agent dodge asteroids.")
    parser.add_argument("--difficulty", choices=["easy", "medium", "hard"], default="easy")
    parser.add_argument("--episodes", type=int, default=5)
    args = parser.parse_args()

    # ---------------------------------------------------------
    # 1. Load the Environment
    # ---------------------------------------------------------
    # render_mode="human" draws every frame inside step().
    # gym.make adds the time limit, so a perfect run still ends.
    env = gym.make("RocketDodge-v0", render_mode="human", difficulty=args.difficulty)

    # ---------------------------------------------------------
    # 2. Load the Trained Agent
    # ---------------------------------------------------------
    model_path = f"models/ppo_rocket_dodge_{args.difficulty}"

    print(f"Loading model from: {model_path}")
    try:
        model = PPO.load(model_path)
        print("Model loaded successfully! Launching visualization...")
    except FileNotFoundError:
        print(f"Error: Could not find '{model_path}.zip'")
        print("Did you run train.py first?")
        return

    # ---------------------------------------------------------
    # 3. Watch it Fly!
    # ---------------------------------------------------------
    for ep in range(args.episodes):
        obs, info = env.reset()
        done = False

        print(f"\n--- Episode {ep + 1} Starting ---")

        while not done:
            action, _states = model.predict(obs, deterministic=True)
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        score = info["final_score"] if terminated else info["score"]
        print(f">>> Episode Finished. Survived {score} s")

        # Pause to see the result before resetting
        time.sleep(2.0)

    env.close()

if __name__ == "__main__":
    main()
