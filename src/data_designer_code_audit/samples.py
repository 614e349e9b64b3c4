"""Bundled example programs, one per supported language."""

from __future__ import annotations

EXAMPLE_CODE: dict[str, str] = {
    "java": """public class DataProcessor {
    private Map<String, Object> cache;

    public Object processData(String key, byte[] data) throws Exception {
        if (cache.containsKey(key)) {
            return cache.get(key);
        }
        Object result = transform(data);
        cache.put(key, result);
        return result;
    }

    private Object transform(byte[] data) {
        return new String(data);
    }
}""",
    "python": """def process_records(records, threshold=100):
    results = []
    for r in records:
        val = r.get('value', 0)
        if val > threshold:
            results.append({'id': r['id'], 'processed': val * 1.5})
    return results

def calculate_metrics(data):
    total = sum(data)
    avg = total / len(data) if data else 0
    return {'total': total, 'average': avg}""",
    "javascript": """function processData(items) {
    const cache = new Map();
    return items.map(item => {
        if (cache.has(item.id)) {
            return cache.get(item.id);
        }
        const result = transform(item);
        cache.set(item.id, result);
        return result;
    });
}

async function fetchAndProcess(url) {
    const response = await fetch(url);
    const data = await response.json();
    return processData(data);
}""",
    "cpp": """#include <iostream>
#include <map>
#include <string>

class DataProcessor {
private:
    std::map<std::string, int> cache;

public:
    int processData(std::string key, int* data, int size) {
        if (cache.find(key) != cache.end()) {
            return cache[key];
        }
        int result = transform(data, size);
        cache[key] = result;
        return result;
    }

    int transform(int* data, int size) {
        int sum = 0;
        for (int i = 0; i < size; i++) {
            sum += data[i];
        }
        return sum;
    }
};""",
    "php": """<?php
class DataProcessor {
    private $cache = [];

    public function processData($key, $data) {
        if (isset($this->cache[$key])) {
            return $this->cache[$key];
        }
        $result = $this->transform($data);
        $this->cache[$key] = $result;
        return $result;
    }

    private function transform($data) {
        return array_map(function($item) {
            return $item * 2;
        }, $data);
    }
}
?>""",
    "csharp": """using System;
using System.Collections.Generic;

public class DataProcessor {
    private Dictionary<string, object> cache;

    public object ProcessData(string key, byte[] data) {
        if (cache.ContainsKey(key)) {
            return cache[key];
        }
        var result = Transform(data);
        cache[key] = result;
        return result;
    }

    private object Transform(byte[] data) {
        return System.Text.Encoding.UTF8.GetString(data);
    }
}""",
}


def example_code(language: str) -> str:
    return EXAMPLE_CODE.get(language, EXAMPLE_CODE["java"])
