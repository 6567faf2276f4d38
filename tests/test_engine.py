from src.village.graph import RoadGraph
from src.world.parcels import Parcel
from src.world.rng import RNG
from src.world.state import VillageState
from src.sim.policies import Decision, Robot, RouteRobot, GoalOrientedRobot, LazyRobot, RandomRobot
from src.sim.engine import Simulator, SimConfig, iter_moves, run_robot, count_steps

LINE = RoadGraph.build(["A-B", "B-C"])

class LostRobot(Robot):
    """Siempre pide ir a un lugar sin camino directo."""
    name = "lost"

    def decide(self, state, memory):
        return Decision(direction="Nowhere", memory=memory)

def line_task():
    return VillageState(LINE, "A", [Parcel("A", "C")])

def test_count_steps_on_line():
    assert count_steps(line_task(), GoalOrientedRobot(LINE), []) == 2
    assert count_steps(line_task(), RouteRobot(["B", "C", "B", "A"]), []) == 2

def test_count_steps_zero_when_nothing_to_deliver():
    state = VillageState(LINE, "A", [])
    assert count_steps(state, GoalOrientedRobot(LINE), []) == 0

def test_run_robot_prints_trace(capsys):
    turns = run_robot(line_task(), GoalOrientedRobot(LINE), [])
    out = capsys.readouterr().out.splitlines()
    assert turns == 2
    assert out == ["Moved to B", "Moved to C", "Done in 2 turns"]

def test_iter_moves_records_each_turn():
    moves = list(iter_moves(line_task(), GoalOrientedRobot(LINE), []))
    assert [m.turn for m in moves] == [1, 2]
    assert [m.place for m in moves] == ["B", "C"]
    assert [m.parcels_left for m in moves] == [1, 0]
    assert all(m.moved for m in moves)

def test_initial_state_is_reusable():
    graph = RoadGraph.default()
    state = VillageState.random(graph, RNG(seed=4))
    snapshot = (state.place, state.parcels)
    n1 = count_steps(state, LazyRobot(graph), [])
    n2 = count_steps(state, LazyRobot(graph), [])
    assert n1 == n2
    assert (state.place, state.parcels) == snapshot

def test_simulator_with_cap_and_wasted_turns():
    cfg = SimConfig(robot="lost", max_turns=3)
    res = Simulator(line_task(), LostRobot(), cfg).run()
    assert res.turns == 3
    assert not res.completed
    assert res.wasted_turns == 3
    assert res.parcels_left == 1 and res.delivered == 0
    assert all(m.place == "A" for m in res.moves)

def test_simulator_runs_to_completion():
    graph = RoadGraph.default()
    state = VillageState.random(graph, RNG(seed=8))
    res = Simulator(state, RandomRobot(graph, RNG(seed=8))).run()
    assert res.completed
    assert res.parcels_total == 5 and res.delivered == 5
    assert res.turns == len(res.moves) > 0

def test_simulator_trace_mode_prints(capsys):
    cfg = SimConfig(robot="goal", trace=True)
    Simulator(line_task(), GoalOrientedRobot(LINE), cfg).run()
    out = capsys.readouterr().out
    assert "Moved to B" in out
    assert "Done in 2 turns" in out

def test_goal_directed_robots_skip_delivered_parcels():
    state = VillageState(LINE, "A", [Parcel("A", "A"), Parcel("B", "C")])
    assert count_steps(state, GoalOrientedRobot(LINE), []) == 2
    assert count_steps(state, LazyRobot(LINE), []) == 2
    assert count_steps(VillageState(LINE, "A", [Parcel("A", "A")]), LazyRobot(LINE), []) == 0
