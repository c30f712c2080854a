import argparse
import os

from stable_baselines3 import PPO

from rocket_dodge.rocket_dodge import RocketDodge

def main():
    # ---------------------------------------------------------
    # 1. Configuration & Setup
    # ---------------------------------------------------------
    parser = argparse.ArgumentParser(description="Train a PPO agent to dodge asteroids.")
    parser.add_argument("--timesteps", type=int, default=200000)
    parser.add_argument("--difficulty", choices=["easy", "medium", "hard"], default="easy")
    args = parser.parse_args()

    SAVE_PATH = f"models/ppo_rocket_dodge_{args.difficulty}"
    LOG_DIR = "logs"

    os.makedirs("models", exist_ok=True)
    os.makedirs(LOG_DIR, exist_ok=True)

    # ---------------------------------------------------------
    # 2. Initialize the Environment
    # ---------------------------------------------------------
    # render_mode=None allows the simulation to run at maximum CPU speed.
    env = RocketDodge(render_mode=None, difficulty=args.difficulty)

    # ---------------------------------------------------------
    # 3. Define the PPO Agent
    # ---------------------------------------------------------
    model = PPO(
        "MlpPolicy",
        env,
        verbose=1,
        tensorboard_log=LOG_DIR,
        device="auto",
        ent_coef=0.01 # dodging needs more exploration than the default 0.0
    )

    print("\n" + "="*50)
    print(f"TRAINING INITIATED: {args.timesteps} steps ({args.difficulty})")
    print("="*50 + "\n")

    # ---------------------------------------------------------
    # 4. Start Learning
    # ---------------------------------------------------------
    model.learn(total_timesteps=args.timesteps)

    # ---------------------------------------------------------
    # 5. Save the Trained Model
    # ---------------------------------------------------------
    model.save(SAVE_PATH)

    print("\n" + "="*50)
    print(f"TRAINING COMPLETE: Model saved as '{SAVE_PATH}.zip'")
    print("="*50 + "\n")

    env.close()

if __name__ == "__main__":
    main()
