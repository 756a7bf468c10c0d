from mapreduce_memory_analyzer import analyze_job

MB = 1024 * 1024

job = {
    "jobId": "job_1700000000000_0042",
    "succeeded": True,
    "configuration": {
        "mapreduce.map.memory.mb": "${container.size.mb}",
        "mapreduce.reduce.memory.mb": "8192",
        "container.size.mb": "6144",
    },
    "mapTasks": [
        {
            "taskId": f"task_1700000000000_0042_m_{i:06d}",
            "isSampled": True,
            "totalRunTimeMs": 95000 + i * 1000,
            "counters": {
                "PHYSICAL_MEMORY_BYTES": (900 + i * 10) * MB,
                "VIRTUAL_MEMORY_BYTES": 3000 * MB,
            },
        }
        for i in range(10)
    ],
    "reduceTasks": [
        {
            "taskId": "task_1700000000000_0042_r_000000",
            "isSampled": True,
            "totalRunTimeMs": 600000,
            "counters": {
                "PHYSICAL_MEMORY_BYTES": 7000 * MB,
                "VIRTUAL_MEMORY_BYTES": 9000 * MB,
            },
        }
    ],
}

analysis = analyze_job(job)
print(f"Job: {analysis.job_id}, worst severity: {analysis.severity.name}")
for result in analysis.results:
    print(f"--- {result.heuristic_name}: {result.severity.name} (score {result.score})")
    for label, value in result.details:
        print(f"  {label}: {value}")
