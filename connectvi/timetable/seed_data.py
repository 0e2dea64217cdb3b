"""
Static reference data for the Amravati city bus network.

The order of STOPS matters: free-text queries resolve start and end
locations by scanning stops in this order.
"""

STOPS = [
    {"id": "stop-1", "name": "Amravati Bus Stand", "lat": 20.9367, "lng": 77.7786, "routes": ["route-1", "route-2"]},
    {"id": "stop-2", "name": "Rajkamal", "lat": 20.9321, "lng": 77.7523, "routes": ["route-1", "route-2", "route-3"]},
    {"id": "stop-3", "name": "Rajapeth", "lat": 20.9242, "lng": 77.7596, "routes": ["route-1"]},
    {"id": "stop-4", "name": "Nawathe", "lat": 20.9125, "lng": 77.7684, "routes": ["route-1"]},
    {"id": "stop-5", "name": "Sai Nagar", "lat": 20.9023, "lng": 77.7781, "routes": ["route-1", "route-2", "route-3"]},
    {"id": "stop-6", "name": "Old Town, Badnera Rly.", "lat": 20.8845, "lng": 77.7984, "routes": ["route-1", "route-2", "route-3", "route-4"]},
    {"id": "stop-7", "name": "Amravati University", "lat": 20.9287, "lng": 77.7472, "routes": ["route-2"]},
    {"id": "stop-8", "name": "Biyani Sqr", "lat": 20.9315, "lng": 77.7501, "routes": ["route-2"]},
    {"id": "stop-9", "name": "Amt Bus Stand", "lat": 20.9358, "lng": 77.7769, "routes": ["route-2"]},
    {"id": "stop-10", "name": "Navsari", "lat": 20.9528, "lng": 77.7483, "routes": ["route-3"]},
    {"id": "stop-11", "name": "Panchawati", "lat": 20.9451, "lng": 77.7512, "routes": ["route-3"]},
    {"id": "stop-12", "name": "Irwin Sq.", "lat": 20.9389, "lng": 77.7547, "routes": ["route-3"]},
    {"id": "stop-13", "name": "PRMIT&R, Badnera", "lat": 20.8901, "lng": 77.7882, "routes": ["route-4"]},
]

def _timing(origin, destination, departure, arrival):
    return {"origin": origin, "destination": destination, "departure": departure, "arrival": arrival}

ROUTES = [
    {
        "id": "route-1",
        "name": "Amravati Bus Stand - Old Town, Badnera",
        "color": "#3b82f6",
        "start_point": "Amravati Bus Stand",
        "end_point": "Old Town, Badnera Rly.",
        "intermediate_stops": ["Rajkamal", "Rajapeth", "Nawathe", "Sai Nagar"],
        "operating_hours": "06:50 AM - 06:25 PM",
        "frequency": "Varies",
        "timings": [
            _timing("Amravati Bus Stand", "Old Town, Badnera", "06:50 AM", "07:15 AM"),
            _timing("Amravati Bus Stand", "Old Town, Badnera", "06:55 AM", "07:20 AM"),
            _timing("Amravati Bus Stand", "Old Town, Badnera", "07:00 AM", "07:25 AM"),
            _timing("Amravati Bus Stand", "Old Town, Badnera", "10:00 AM", "10:30 AM"),
            _timing("Amravati Bus Stand", "Old Town, Badnera", "10:15 AM", "10:45 AM"),
            _timing("Old Town, Badnera", "Amravati Bus Stand", "02:15 PM", "02:40 PM"),
            _timing("Old Town, Badnera", "Amravati Bus Stand", "02:25 PM", "02:50 PM"),
            _timing("Old Town, Badnera", "Amravati Bus Stand", "02:45 PM", "03:10 PM"),
            _timing("Old Town, Badnera", "Amravati Bus Stand", "05:35 PM", "06:05 PM"),
            _timing("Old Town, Badnera", "Amravati Bus Stand", "05:55 PM", "06:25 PM"),
        ],
    },
    {
        "id": "route-2",
        "name": "Amravati University - Old Town, Badnera",
        "color": "#22c55e",
        "start_point": "Amravati University",
        "end_point": "Old Town, Badnera",
        "intermediate_stops": ["Biyani Sqr", "Amt Bus Stand", "Rajkamal", "Sai Nagar"],
        "operating_hours": "06:35 AM - 06:05 PM",
        "frequency": "Varies",
        "timings": [
            _timing("Amravati University", "Old Town, Badnera", "06:35 AM", "07:20 AM"),
            _timing("Amravati University", "Old Town, Badnera", "09:30 AM", "10:15 AM"),
            _timing("Amravati University", "Old Town, Badnera", "09:45 AM", "10:30 AM"),
            _timing("Old Town, Badnera", "Amravati University", "02:05 PM", "02:50 PM"),
            _timing("Old Town, Badnera", "Amravati University", "02:35 PM", "03:20 PM"),
            _timing("Old Town, Badnera", "Amravati University", "05:20 PM", "06:05 PM"),
        ],
    },
    {
        "id": "route-3",
        "name": "Navsari - Old Town Badnera",
        "color": "#f59e0b",
        "start_point": "Navsari",
        "end_point": "Old Town Badnera",
        "intermediate_stops": ["Panchawati", "Irwin Sq.", "Rajkamal", "Sai Nagar"],
        "operating_hours": "06:30 AM - 06:25 PM",
        "frequency": "Varies",
        "timings": [
            _timing("Navsari", "Old Town, Badnera", "06:30 AM", "07:05 AM"),
            _timing("Navsari", "Old Town, Badnera", "06:55 AM", "07:30 AM"),
            _timing("Navsari", "Old Town, Badnera", "09:45 AM", "10:20 AM"),
            _timing("Navsari", "Old Town, Badnera", "10:00 AM", "10:35 AM"),
            _timing("Old Town, Badnera", "Navsari", "02:05 PM", "02:40 PM"),
            _timing("Old Town, Badnera", "Navsari", "02:15 PM", "02:50 PM"),
            _timing("Old Town, Badnera", "Navsari", "05:35 PM", "06:10 PM"),
            _timing("Old Town, Badnera", "Navsari", "05:50 PM", "06:25 PM"),
        ],
    },
    {
        "id": "route-4",
        "name": "College Bus Service",
        "color": "#ef4444",
        "start_point": "PRMIT&R, Badnera",
        "end_point": "Old Town Badnera",
        "intermediate_stops": [],
        "operating_hours": "07:00 AM - 03:00 PM",
        "frequency": "Varies (Free of Cost)",
        "timings": [
            _timing("PRMIT&R, Badnera", "Old Town Badnera", "07:00 AM", "07:30 AM"),
            _timing("PRMIT&R, Badnera", "Old Town Badnera", "10:30 AM", "11:00 AM"),
            _timing("Old Town Badnera", "PRMIT&R, Badnera", "02:30 PM", "03:00 PM"),
        ],
    },
]

# Initial fleet; last_update is stamped when the simulator is created
VEHICLES = [
    {"id": "bus-1", "route_id": "route-1", "lat": 20.9367, "lng": 77.7786, "heading": 45, "speed": 25, "next_stop": "stop-2"},
    {"id": "bus-2", "route_id": "route-2", "lat": 20.9287, "lng": 77.7472, "heading": 180, "speed": 15, "next_stop": "stop-8"},
    {"id": "bus-3", "route_id": "route-3", "lat": 20.9528, "lng": 77.7483, "heading": 270, "speed": 30, "next_stop": "stop-11"},
    {"id": "bus-4", "route_id": "route-4", "lat": 20.8901, "lng": 77.7882, "heading": 90, "speed": 20, "next_stop": "stop-6"},
]
