import argparse
import datetime
import random


SERVICES = ["http", "https", "dns", "ssh", "smtp", "MS-RPC Endpoint Mapper", "Network Time"]
ZONES = ["Trust", "Untrust", "DMZ", "V1-Trust"]
ACTIONS = ["Permit", "Deny", "Reject"]


def traffic_line(ts: datetime.datetime, rng: random.Random) -> str:
    src = f"10.1.{rng.randint(0, 3)}.{rng.randint(1, 254)}"
    dst = f"192.168.{rng.randint(0, 3)}.{rng.randint(1, 254)}"
    gap = " " * rng.choice([1, 1, 1, 2, 3])

    return gap.join([
        ts.strftime("%b"),
        ts.strftime("%d"),
        ts.strftime("%H:%M:%S"),
        "10.0.0.1",
        "ns2000:",
        "NetScreen",
        "device_id=ns2000",
        "[Root]system-notification-00257(traffic):",
        "start_time=\"" + ts.strftime("%Y-%m-%d %H:%M:%S") + "\"",
        "duration=" + str(rng.randint(0, 300)),
        "policy_id=" + str(rng.randint(1, 400)),
        "service=" + rng.choice(SERVICES),
        "proto=" + rng.choice(["6", "17"]),
        "src zone=" + rng.choice(ZONES),
        "dst zone=" + rng.choice(ZONES),
        "action=" + rng.choice(ACTIONS),
        "sent=" + str(rng.randint(0, 90000)),
        "rcvd=" + str(rng.randint(0, 90000)),
        "src=" + src,
        "dst=" + dst,
        "src_port=" + str(rng.randint(1024, 65535)),
        "dst_port=" + str(rng.choice([22, 25, 53, 80, 123, 135, 443])),
    ])


def statistics_line(ts: datetime.datetime) -> str:
    return (
        f"{ts.strftime('%b %d %H:%M:%S')} 10.0.0.1 ns2000: NetScreen device_id=ns2000 "
        "[Root]system-information-00536: Log statistics; "
        "sent 512 messages, dropped 0 messages."
    )


def generate_firewall_logs(
    filename: str = "netscreen.log",
    target_lines: int = 1000,
    statistics_every: int = 250,
    seed: int | None = None,
):
    rng = random.Random(seed)
    current_time = datetime.datetime(2009, 2, 24, 8, 0, 1)

    with open(filename, "w") as f:
        for i in range(target_lines):
            current_time += datetime.timedelta(seconds=rng.randint(0, 5))

            if statistics_every and i and i % statistics_every == 0:
                msg = statistics_line(current_time)
            else:
                msg = traffic_line(current_time, rng)

            f.write(msg + "\n")

    print(f"Generated {target_lines} lines in {filename}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Generate sample NetScreen traffic logs")
    parser.add_argument("--output", default="netscreen.log")
    parser.add_argument("--lines", type=int, default=1000)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args()

    generate_firewall_logs(args.output, args.lines, seed=args.seed)
